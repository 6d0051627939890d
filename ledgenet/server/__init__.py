"""The game server and its command-line entry point."""