import os

USER_SPECS_DATA = os.environ.get("KARAOKE_SETTINGS", "karaoke.yaml")

SCREEN_WIDTH = 80
DEFAULT_SETTINGS = {
    "log_level": "WARNING",
    "screen_width": SCREEN_WIDTH,
    "suggest_commands": True,
}

# Display order of the main menu
MENU = [
    ("add", "Add a new song to the song book"),
    ("play", "Play next song in the queue"),
    ("choose", "Choose a song to sing!"),
    ("quit", "Give up. Exit the program"),
]

MAX_SUGGESTION_DISTANCE = 2

ACTION_PROMPT = "What do you wanna do?: "
CHOICE_PROMPT = "Your choice: "
ARTIST_PROMPT = "Enter the artist's name: "
TITLE_PROMPT = "Enter the title: "
VIDEO_URL_PROMPT = "Enter the video URL: "

FAREWELL = "Thanks for playing, yo"
EMPTY_QUEUE = (
    "Sorry there are no songs in the queue. Use choose from the menu to add some"
)
