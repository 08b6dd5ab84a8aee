"""
simplecraft
An ordered-ingredient crafting session engine for text/menu driven games.
"""
