#!/usr/bin/env python3
"""TimerProgress — console demo entry point.

Run with:
    python main.py [DURATION_MS] [DELAY_MS]
    python -m timerprogress [DURATION_MS] [DELAY_MS]
"""

from timerprogress.__main__ import main


if __name__ == "__main__":
    main()
