"""
Command-line front end for smsencoding.

Prints the encoding breakdown of a message, either once for text given on
the command line or interactively, one line at a time.
"""

import sys
import json
import logging
from typing import Optional

from .analyzer import get_encoding_info, find_non_gsm_characters
from .version import __version__
from .exceptions import SMSEncodingError
from .types import EncodingInfo, EncodingType


def format_info(info: EncodingInfo) -> str:
    """Render an EncodingInfo as aligned text lines."""
    septets = str(info.septets_count) if info.encoding is EncodingType.GSM7 else "n/a"

    return "\n".join([
        f"Encoding:   {info.encoding.name}",
        f"Parts:      {info.parts_count}",
        f"Septets:    {septets}",
        f"Octets:     {info.octets_count}",
        f"Chars left: {info.chars_left}",
    ])


class EncodingCLI:
    """Interactive SMS encoding REPL."""

    def __init__(self, concatenated: bool = True, as_json: bool = False):
        """
        Initialize CLI.

        Args:
            concatenated: Analyse as concatenated SMS
            as_json: Print results as JSON
        """
        self.concatenated = concatenated
        self.as_json = as_json
        self.analysed = 0

    def analyse(self, text: str):
        """Analyse text and display the result."""
        info = get_encoding_info(text, concatenated=self.concatenated)
        self.analysed += 1

        if self.as_json:
            print(json.dumps(info.to_dict(), ensure_ascii=False))
            return

        print(format_info(info))

        if info.encoding is EncodingType.UCS2:
            chars = "".join(find_non_gsm_characters(text))
            print(f"Non-GSM:    {chars}")

    def run(self):
        """Run the REPL."""
        print(f"smsencoding CLI v{__version__}")
        print("Enter message text to analyse it")
        print("Type 'help' for commands, 'quit' to exit\n")

        try:
            while True:
                try:
                    line = input("> ")

                    cmd = line.strip().lower()
                    if not cmd:
                        continue

                    if cmd in ("quit", "exit", "q"):
                        break
                    elif cmd == "help":
                        self._print_help()
                        continue
                    elif cmd == "concat":
                        self.concatenated = not self.concatenated
                        print(f"Concatenation: {'on' if self.concatenated else 'off'}")
                        continue

                    self.analyse(line)
                    print()

                except KeyboardInterrupt:
                    print("\nUse 'quit' to exit")
                    continue
                except EOFError:
                    break

        except SMSEncodingError as e:
            print(f"\nError: {e}")
            return 1
        except Exception as e:
            print(f"\nUnexpected error: {e}")
            logging.exception("CLI error")
            return 1
        finally:
            print(f"\nMessages analysed: {self.analysed}")

        return 0

    def _print_help(self):
        """Print help message."""
        print(f"""
Available commands:
  <text>        - Analyse message text
  concat        - Toggle concatenation mode (currently {'on' if self.concatenated else 'off'})
  help          - Show this help message
  quit/exit/q   - Exit CLI

A single SMS holds 160 septets or 140 octets. Concatenated messages
spend 6 octets (7 septets) of every part on the User Data Header.
        """)


def main(argv: Optional[list[str]] = None):
    """Main entry point for CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="smsencoding CLI - GSM 03.38 SMS encoding calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sms-encoding "Hello message with €-sign"
  sms-encoding --no-concat --json "Hello"
  echo "漢字" | sms-encoding -
  sms-encoding
        """
    )

    parser.add_argument(
        "text",
        nargs="?",
        help="Message text, '-' to read from stdin, omit for interactive mode"
    )
    parser.add_argument(
        "--no-concat",
        action="store_true",
        help="Count parts as independent single messages"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print result as JSON"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    # Setup logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    cli = EncodingCLI(
        concatenated=not args.no_concat,
        as_json=args.json
    )

    if args.text is None:
        return cli.run()

    text = args.text
    if text == "-":
        text = sys.stdin.read().rstrip("\n")

    try:
        cli.analyse(text)
    except SMSEncodingError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
