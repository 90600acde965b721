"""
Games module - Bundled boards.

Each board has its own subpackage with:
- Board data (locations, routes, cards)
- A factory returning its GameDefinition
"""
