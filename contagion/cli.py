"""
Contagion CLI - Command-line interface for the engine.

Usage:
    contagion play --players alice bob [--seed N] [--epidemics K]
                                        Auto-play a game and print the event log
    contagion show-board [--definition FILE]
                                        Print the board summary
"""

import argparse
import logging
import sys

from .engine_core import Action, ActionType, EventLog, Game, SeededRandomness
from .engine_core.events import Event, EventType
from .engine_core.state import StateName
from .spec_schema import DefinitionLoadError, GameSettings, load_definition


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Contagion - Cooperative Outbreak Board Game Engine",
        prog="contagion",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Auto-play a game")
    play_parser.add_argument("--players", nargs="+", default=["alice", "bob"], help="Player ids in turn order")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument("--epidemics", type=int, default=4, help="Number of epidemic cards")
    play_parser.add_argument("--definition", help="Path to a JSON board definition")
    play_parser.add_argument("--max-turns", type=int, default=100, help="Stop after this many turns")

    # Show board command
    board_parser = subparsers.add_parser("show-board", help="Print the board")
    board_parser.add_argument("--definition", help="Path to a JSON board definition")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "show-board":
        cmd_show_board(args)
    else:
        parser.print_help()
        sys.exit(1)


def _load(args):
    if not args.definition:
        from .games.world import create_world_definition
        return create_world_definition()
    try:
        return load_definition(args.definition)
    except FileNotFoundError:
        print(f"Error: File not found: {args.definition}")
        sys.exit(1)
    except DefinitionLoadError as e:
        print(f"Error: {e}")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)


# The one legal action for each sub-state
_NEXT_ACTION = {
    StateName.PLAYER_ACTIONS: ActionType.ACTION_PASS,
    StateName.DRAW_PLAYER_CARDS: ActionType.DRAW_PLAYER_CARD,
    StateName.EPIDEMIC: ActionType.INCREASE_INFECTION_INTENSITY,
    StateName.DRAW_INFECTION_CARDS: ActionType.DRAW_INFECTION_CARD,
}


def autoplay(game: Game, max_turns: int) -> int:
    """
    Drive the game with the only legal action until defeat or max_turns.

    Returns the number of completed turns.
    """
    turns = 0
    while not game.state.terminal and turns < max_turns:
        state = game.state
        action = Action(action_type=_NEXT_ACTION[state.name])
        game.act(state.acting_player(), action)
        if state.name == StateName.DRAW_INFECTION_CARDS and game.state.name == StateName.PLAYER_ACTIONS:
            turns += 1
    return turns


def format_event(event: Event) -> str:
    """One-line description of an event."""
    p = event.payload
    if event.event_type == EventType.INITIAL_SITUATION:
        situation = p["situation"]
        roles = ", ".join(f"{pl.player_id} ({pl.role})" for pl in situation.players)
        return f"Game {situation.game_id} starts: {roles}"
    if event.event_type == EventType.STATE_CHANGE:
        state = p["state"]
        details = [
            f"{key}={value}"
            for key, value in (
                ("player", state.player),
                ("actions", state.actions_remaining),
                ("draws", state.draws_remaining),
                ("disease", state.disease),
            )
            if value is not None
        ]
        return f"-> {state.name.value} {' '.join(details)}".rstrip()
    if event.event_type == EventType.DRAW_PLAYER_CARD:
        card = p["card"]
        label = card.location or card.name or card.card_type.value
        return f"   {p['player']} draws {label}"
    if event.event_type == EventType.INFECTION_RATE_INCREASED:
        return f"   EPIDEMIC: infection rate now {p['infection_rate']}"
    if event.event_type == EventType.DRAW_AND_DISCARD_INFECTION_CARD:
        return f"   infection card: {p['card'].location}"
    if event.event_type == EventType.OUTBREAK:
        return f"   OUTBREAK of {p['disease']} in {p['location']}"
    if event.event_type == EventType.INFECT:
        return f"   +1 {p['disease']} in {p['location']}"
    if event.event_type == EventType.INFECTION_CARDS_RESTACK:
        return f"   {len(p['cards'])} infection cards restacked"
    return event.event_type.value


def cmd_play(args):
    """Auto-play a game."""
    definition = _load(args)
    if not definition.min_players <= len(args.players) <= definition.max_players:
        print(f"Error: {definition.game_name} supports "
              f"{definition.min_players}-{definition.max_players} players")
        sys.exit(1)

    log = EventLog()
    game = Game(
        definition=definition,
        settings=GameSettings(number_of_epidemics=args.epidemics),
        players=args.players,
        sink=log,
        rng=SeededRandomness(args.seed),
    )
    game.setup()
    turns = autoplay(game, args.max_turns)

    for event in log.events:
        print(format_event(event))

    situation = game.situation
    print()
    print(f"Turns played: {turns}")
    print(f"Outbreaks: {situation.outbreak_count}/{situation.max_outbreaks}")
    print(f"Final state: {situation.state.name.value}")


def cmd_show_board(args):
    """Print the board summary."""
    definition = _load(args)
    print(f"{definition.game_name} ({definition.game_id})")
    print(f"Players: {definition.min_players}-{definition.max_players}")
    print(f"Start: {definition.starting_location}")
    print(f"Player cards: {len(definition.player_cards)}")
    print(f"Roles: {', '.join(r.name for r in definition.roles)}")
    for disease in definition.diseases:
        cities = [loc for loc in definition.locations if loc.disease == disease.name]
        print(f"\n{disease.name} ({disease.cubes} cubes)")
        for loc in cities:
            print(f"  {loc.name}: {', '.join(loc.adjacent)}")


if __name__ == "__main__":
    main()
