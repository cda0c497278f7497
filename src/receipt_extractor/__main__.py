import sys

from receipt_extractor.cli import main

sys.exit(main())
