#!/usr/bin/env python3
"""CLI tool for the deck server."""
import sys
from typing import Optional

import httpx

from deckserver.config import config


def _client() -> httpx.Client:
    return httpx.Client(base_url=config.api_url, timeout=10.0)


def _fail(response: httpx.Response):
    """Print the server's error message and exit."""
    try:
        message = response.json()
    except ValueError:
        message = response.text
    print(f"Error ({response.status_code}): {message}")
    sys.exit(1)


def _print_cards(cards: list[dict]):
    print(f"\n{'Code':<6} {'Value':<8} {'Suit'}")
    print("-" * 26)
    for card in cards:
        print(f"{card['code']:<6} {card['value']:<8} {card['suit']}")


def create_deck(shuffled: bool, cards: Optional[str]):
    """Create a deck."""
    params = {"cards": cards} if cards else None
    with _client() as client:
        response = client.post("/deck", params=params, json={"shuffled": shuffled})
    if response.status_code != 201:
        _fail(response)

    data = response.json()
    print(f"Deck:      {data['DeckID']}")
    print(f"Shuffled:  {data['Shuffled']}")
    print(f"Remaining: {data['Remaining']}")


def open_deck(deck_id: str):
    """Open a deck and list its cards."""
    with _client() as client:
        response = client.put(f"/deck/{deck_id}/open")
    if response.status_code != 200:
        _fail(response)

    data = response.json()
    print(f"\nDeck: {data['deck_id']}")
    print(f"  Shuffled:  {data['shuffled']}")
    print(f"  Remaining: {data['remaining']}")
    _print_cards(data["cards"])


def draw_cards(deck_id: str, count: int):
    """Draw cards from a deck."""
    with _client() as client:
        response = client.post(f"/deck/{deck_id}/draw", json={"count": count})
    if response.status_code != 200:
        _fail(response)

    cards = response.json()
    if not cards:
        print("No cards drawn.")
        return
    _print_cards(cards)
    print(f"\nDrew {len(cards)} cards")


def serve():
    """Run the HTTP server."""
    import uvicorn
    uvicorn.run("deckserver.main:app", host=config.host, port=config.port)


def print_usage():
    """Print usage information."""
    print("""
Deck Server CLI

Usage:
  python -m deckserver.cli <command> [args]

Commands:
  serve                                 Run the HTTP server
  create [--shuffled] [--cards CODES]   Create a deck
  open <deck_id>                        Open a deck and list its cards
  draw <deck_id> <count>                Draw cards from the top of a deck

Examples:
  python -m deckserver.cli create --shuffled
  python -m deckserver.cli create --cards AS,KD,10H
  python -m deckserver.cli draw 8b5c3d2e-4f9a-4c1b-9e7d-2a6f0c8b1d3e 2
""")


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print_usage()
        sys.exit(1)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    if command == "serve":
        serve()

    elif command == "create":
        cards = None
        if "--cards" in args:
            index = args.index("--cards")
            if index + 1 >= len(args):
                print("Error: Card codes required after --cards.")
                sys.exit(1)
            cards = args[index + 1]
        create_deck("--shuffled" in args, cards)

    elif command == "open":
        if not args:
            print("Error: Deck ID required.")
            print("Usage: python -m deckserver.cli open <deck_id>")
            sys.exit(1)
        open_deck(args[0])

    elif command == "draw":
        if len(args) < 2 or not args[1].isdigit():
            print("Error: Deck ID and count required.")
            print("Usage: python -m deckserver.cli draw <deck_id> <count>")
            sys.exit(1)
        draw_cards(args[0], int(args[1]))

    elif command in ("help", "-h", "--help"):
        print_usage()

    else:
        print(f"Unknown command: {command}")
        print_usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
