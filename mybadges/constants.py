"""Well-known paths and markup shared by renderers and stores."""

MY_BADGES_DIR = "my-badges"
MY_BADGES_JSON_PATH = f"{MY_BADGES_DIR}/my-badges.json"
README_PATH = "readme.md"

README_START_MARKER = "<!-- my-badges start -->"
README_END_MARKER = "<!-- my-badges end -->"

PROJECT_URL = "https://github.com/my-badges/my-badges"
README_HEADER = f'<h4><a href="{PROJECT_URL}">My Badges</a></h4>\n\n'

DEFAULT_IMAGE_SIZE = 64
PAGE_IMAGE_SIZE = 128

DEFAULT_COMMITTER_NAME = "GitHub Actions"
DEFAULT_COMMITTER_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"


def badge_page_path(badge_id: str) -> str:
    return f"{MY_BADGES_DIR}/{badge_id}.md"
