"""
Notefall
========
Balls fall from the top of the screen. Draw platforms for them to bounce on;
every bounce plays the platform's note.

Controls:
- Left drag: Draw a platform
- Right click: Delete a platform (-5 points)
- 1-5: Select platform type (1-3 plain, 4 booster, 5 fragile)
- ESC: Quit
"""
from notefall.game import main


# =============================================================================
# ENTRY POINT
# =============================================================================
if __name__ == "__main__":
    main()
