#!/usr/bin/env python3
"""
Image to ASCII Art Renderer
===========================
Command line launcher; see ascii_art_renderer.cli for options.
"""

import sys

from ascii_art_renderer.cli import main


if __name__ == '__main__':
    sys.exit(main())
