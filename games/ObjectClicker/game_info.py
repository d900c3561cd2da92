"""ObjectClicker - Game Info

Click the target before it moves. Score as many hits as you can before
the countdown runs out; the best score is kept between sessions.
"""

NAME = "Object Clicker"
DESCRIPTION = "Click the target before it moves - beat your best score before time runs out"
VERSION = "1.0.0"
AUTHOR = "Object Clicker Team"

ARGUMENTS = [
    {
        'name': '--duration',
        'type': int,
        'default': None,
        'help': 'Round length in seconds'
    },
    {
        'name': '--interval',
        'type': float,
        'default': None,
        'help': 'Seconds between automatic target moves'
    },
    {
        'name': '--images',
        'type': str,
        'default': None,
        'help': 'Comma-separated image variants for the target'
    },
    {
        'name': '--assets-dir',
        'type': str,
        'default': None,
        'help': 'Directory holding the target images'
    },
    {
        'name': '--target-size',
        'type': int,
        'default': None,
        'help': 'Target width/height in pixels'
    },
    {
        'name': '--store',
        'type': str,
        'default': None,
        'help': 'JSON file holding the high score'
    },
    {
        'name': '--no-persist',
        'action': 'store_true',
        'default': False,
        'help': 'Keep the high score in memory only'
    },
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for target placement'
    },
]


def get_game_mode(**kwargs):
    """Factory function to create game instance."""
    from games.ObjectClicker.game_mode import ObjectClickerMode
    return ObjectClickerMode(**kwargs)
