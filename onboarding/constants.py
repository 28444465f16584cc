"""Exit codes and reserved values shared by the setup wizard."""

ONBOARDING_SUCCESS = 0  # Setup completed
ONBOARDING_QUIT = 1  # User cancelled (Ctrl+C, or quit from the error screen)
ONBOARDING_UNREACHABLE = 2  # System status could not be fetched
ONBOARDING_NOT_REQUIRED = 3  # Already configured, nothing to do

# Config location meaning "use the current working directory"
CONFIG_IN_WORKING_DIR = "config.yml"

CONFIG_FILENAME = "config.yml"
DATABASE_FILENAME = "stash-go.sqlite"
GENERATED_DIRNAME = "generated"
CACHE_DIRNAME = "cache"
BLOBS_DIRNAME = "blobs"
STASH_DIRNAME = ".stash"

# Shown in place of a blobs directory when blobs are stored in the database
BLOBS_IN_DATABASE = "<using database>"
