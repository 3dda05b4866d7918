"""
Run the renderer from a source checkout:

    $ python main.py --mesh model.obj --mode filled
"""
import sys

from softraster.app import main


if __name__ == "__main__":
    sys.exit(main())
