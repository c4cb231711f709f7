import sys

from transcript_annotator.app.app import main

sys.exit(main())
