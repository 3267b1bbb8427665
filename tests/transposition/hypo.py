import os

from hypothesis import settings
from hypothesis import strategies as st

from transposition.pitch import CHROMATIC, SPELLING_LOOKUP


def configure_hypo() -> None:
    settings.register_profile("fast", max_examples=50)
    if os.environ.get("HYPO_SLOW") != "1":
        settings.load_profile("fast")


def canonical_strategy() -> st.SearchStrategy[str]:
    """One of the twelve canonical chromatic labels."""
    return st.sampled_from(CHROMATIC)


def spelling_strategy() -> st.SearchStrategy[str]:
    """Any accepted spelling: single names and compound labels."""
    return st.sampled_from(sorted(SPELLING_LOOKUP))
