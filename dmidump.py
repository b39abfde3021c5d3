#!/usr/bin/env python3

"""
https://www.dmtf.org/sites/default/files/standards/documents/DSP0134_3.8.0.pdf
"""

import sys
from smbdump.cli import main

sys.exit(main())
