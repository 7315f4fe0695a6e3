import sys

from ascii_player.main import main


sys.exit(main())
