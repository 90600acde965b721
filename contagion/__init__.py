"""
Contagion - Cooperative Outbreak Board Game Engine

A deterministic, rules-driven engine for a cooperative disease-outbreak
board game. The engine takes a board definition and provides:
- Setup of decks, roles and initial infections
- A turn state machine validating player actions
- Outbreak and epidemic resolution
- A complete event log of everything that happens
"""

__version__ = "0.1.0"
