"""Legacy entry point for the Morse decoder prompt."""

from morse_tree_decoder.cli import main
from morse_tree_decoder.decoder import decode_message

__all__ = ["decode_message", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
