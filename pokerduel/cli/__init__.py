"""Command-line front-end for Poker Duel."""
