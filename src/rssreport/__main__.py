import sys

from rssreport.main import main

sys.exit(main())
