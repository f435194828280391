"""
Player Gateway - HTTP front door of the elevator game server

Responsibilities:
- Player registration with generated credentials
- Pause/resume/reset/unregister of a player's game session
- Per-player and admin authorization (HTTP Basic)
- Leaderboard and CSV dump of the players table
- Max number of users administration
"""
