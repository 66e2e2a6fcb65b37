"""Cakebook. Query a fixed collection of recipes from the command line.

Recipes arrive as loosely-typed JSON records. The same logical field may live
under different keys (`Name`, `name`, `Title`), so nothing reads a record
directly: `models` resolves fields, `queries` filters collections, and
`services.RecipeSession` owns the only mutable state, the saved ingredients.

Nothing here validates the data. Missing or odd fields degrade to empty
values instead of raising.
"""
