import sys

from softraster.app import main

sys.exit(main())
