import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def isolate_api_key():
    """Temporarily remove any real Gemini API key from the environment.

    Tests that need a key patch it in themselves. The original value is
    restored when the session ends.
    """
    saved = os.environ.pop("GOOGLE_AI_TOKEN", None)
    try:
        yield
    finally:
        if saved is not None:
            os.environ["GOOGLE_AI_TOKEN"] = saved
