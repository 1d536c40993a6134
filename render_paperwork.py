#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Render Art Battle event paperwork PDFs from saved paperwork-data payloads.
"""

import sys

import paperwork_composer.cli


if __name__ == "__main__":
	sys.exit(paperwork_composer.cli.main())
