#!/usr/bin/env python3
"""
Launcher for the IRC bot (python main.py [--health-check])
"""

from ircbot.main import run

if __name__ == "__main__":
    run()
