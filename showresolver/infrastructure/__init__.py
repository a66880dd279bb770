"""
Couche infrastructure : persistance du catalogue local et snapshot du catalogue distant.
"""
