import cProfile
import logging
import pstats

import internal.prelude as pre
from game import Launcher


iscprofile: bool = False
iscprofile = pre.DEBUG_GAME_CPROFILE


def main():
    """Main entry point"""

    logging.basicConfig(
        level=logging.DEBUG if pre.DDEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    launcher = Launcher()
    launcher.start()


if __name__ == "__main__":
    if iscprofile:
        cProfile.run("main()", "cProfile_main", sort="cumulative")
        p = pstats.Stats("cProfile_main")
        p.strip_dirs().sort_stats("cumulative").print_stats()
    else:
        main()
