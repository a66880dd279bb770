"""
Couche adaptateurs.

Les adaptateurs implémentent les ports définis dans core/ports/ :
- api/ : clients des services distants (TVDB, catalogue des séries connues)
- cli/ : interface ligne de commande (Typer)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
