#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Command Line
==========================================
Render an image file to stdout, or print the text-shape showcase.
"""

import argparse
import sys
from typing import List, Optional

from ascii_art_renderer.config import RenderConfig
from ascii_art_renderer.constants import DEFAULT_CHAR_ASPECT_RATIO, DEFAULT_OUTPUT_WIDTH, CharacterSet
from ascii_art_renderer.errors import DecodeFailure, ResourceNotFound, SpeechUnavailable
from ascii_art_renderer.image_source import load_pixels, resolve_resource
from ascii_art_renderer.logging_setup import configure_logging, get_logger
from ascii_art_renderer.renderer import AsciiArtGenerator
from ascii_art_renderer.shapes import HEART, SMILEY, draw_circle, draw_square, stamp_pattern
from ascii_art_renderer.speech import Speaker, select_speaker
from ascii_art_renderer.words import letters_separated, number_to_words


# =============================================================================
# DEMO
# =============================================================================

def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def demo(speaker: Optional[Speaker] = None) -> None:
    """Print number words, spelling and fixed shapes; voice them if a speaker is given."""
    def say(method: str, value) -> None:
        if speaker is None:
            return
        try:
            getattr(speaker, method)(value)
        except SpeechUnavailable as exc:
            get_logger().warning("%s", exc)

    for number in (1, 300, 1408):
        print(f"{number} -> {number_to_words(number)}")
        say('speak_number', number)

    word = "Morizo"
    print(f"{word} -> {letters_separated(word)}")
    say('speak_spelled', word)

    _print_lines(draw_square(5))
    print()
    _print_lines(draw_square(6, '*', filled=False))

    print("Outline circle (r=8):")
    _print_lines(draw_circle(8, '*', filled=False))
    print("\nFilled circle (r=6):")
    _print_lines(draw_circle(6, '#', filled=True))

    print("Heart x1:")
    _print_lines(stamp_pattern(HEART, 1, 1, '@', ' '))
    print("\nHeart x2 (scaled):")
    _print_lines(stamp_pattern(HEART, 2, 2, '*', ' '))
    print("\nSmiley x1:")
    _print_lines(stamp_pattern(SMILEY, 1, 1, '#', ' '))


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================

def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='ascii-art-renderer',
        description='Convert images to ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Basic conversion
  %(prog)s image.png 80                       # Set width to 80 chars
  %(prog)s image.png --width=80 --invert      # Light text on dark background
  %(prog)s image.png --charset blocks         # Use block characters
  %(prog)s --demo                             # Print the shape showcase
        """
    )

    # Input/Output
    parser.add_argument('input', nargs='?', help='Input image file')
    parser.add_argument('width_arg', nargs='?', metavar='width',
                        help=f'Output width in characters (default {DEFAULT_OUTPUT_WIDTH})')
    parser.add_argument('-o', '--output', help='Write the text to a file instead of stdout')

    # Size options
    parser.add_argument('-w', '--width', help='Output width in characters; overrides the positional width')
    parser.add_argument('--char-ratio', default=str(DEFAULT_CHAR_ASPECT_RATIO),
                        help='Character aspect ratio (width/height)')

    # Character set options
    parser.add_argument('--charset', default='classic',
                        help='Character set: ' + ', '.join(CharacterSet.names()))
    parser.add_argument('--custom-charset', help='Custom character string (sparse to dense)')
    parser.add_argument('-i', '--invert', action='store_true', help='Invert brightness')
    parser.add_argument('--grayscale', action='store_true',
                        help="Decode as a single grayscale channel instead of RGB luma")

    # Other options
    parser.add_argument('--demo', action='store_true', help='Print the text-shape showcase')
    parser.add_argument('--speak', action='store_true', help='Voice the showcase with the platform TTS')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    logger = configure_logging(verbose=args.verbose)

    if args.demo:
        demo(select_speaker() if args.speak else None)
        if not args.input:
            return 0

    if not args.input:
        parser.error('an image path is required')

    try:
        path = resolve_resource(args.input)
        buffer = load_pixels(path, channels=1 if args.grayscale else 3)
    except (ResourceNotFound, DecodeFailure) as exc:
        logger.error("%s", exc)
        logger.error("Could not render ASCII from image.")
        return 1

    config = RenderConfig.build(
        width=args.width if args.width is not None else args.width_arg,
        invert=args.invert,
        char_aspect_ratio=args.char_ratio,
        charset=args.charset,
        custom_charset=args.custom_charset,
    )
    generator = AsciiArtGenerator(config)

    if args.output:
        result = generator.generate(buffer)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(result.text)
        logger.info("Saved %dx%d characters to %s", result.width, result.height, args.output)
    else:
        generator.write(buffer, sys.stdout)

    return 0


if __name__ == '__main__':
    sys.exit(main())
