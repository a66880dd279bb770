"""
Application services layer.

Pure functions for name normalization, episode extraction, release matching
and quality classification, plus the resolution pipeline that orchestrates
them against the local catalog and remote sources.

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
