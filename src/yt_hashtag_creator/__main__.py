"""Allow running the CLI with ``python -m yt_hashtag_creator``."""

from .cli import main

if __name__ == "__main__":
    main()
