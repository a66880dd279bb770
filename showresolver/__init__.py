"""
ShowResolver - Identification de fichiers d'episodes de series TV.

Ce package transforme un nom de release/fichier (ex: Show.Name.S02E14.720p.HDTV.x264-GROUP)
en une reference (serie, episode) normalisee, resolue contre plusieurs sources de donnees,
et classe la qualite video de la release.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (normalisation, extraction, matching, resolution)
- adapters/ : Couche infrastructure (CLI, clients API)
- infrastructure/ : Persistance (catalogue local SQLite, snapshot du catalogue distant)
"""

__version__ = "0.1.0"
