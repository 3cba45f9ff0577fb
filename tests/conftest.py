"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gitie.config import ResolvedConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_env(temp_dir, monkeypatch):
    """Point HOME and the working directory at empty temporary directories.

    Returns:
        (home, workdir) paths.
    """
    home = temp_dir / "home"
    workdir = temp_dir / "work"
    home.mkdir()
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    for name in ("GITIE_API_KEY", "GITIE_ASSETS_CONFIG", "GITIE_ASSETS_PROMPT", "GITIE_LOG"):
        monkeypatch.delenv(name, raising=False)

    return home, workdir


@pytest.fixture
def resolved_config():
    """A fully resolved configuration."""
    return ResolvedConfig(
        api_url="http://localhost:11434/v1/chat/completions",
        model_name="test-model",
        temperature=0.7,
        api_key=None,
        system_prompt="You write commit messages.",
        request_timeout=30.0,
    )


@pytest.fixture
def sample_diff():
    """A small staged diff."""
    return """diff --git a/new_file.py b/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/new_file.py
@@ -0,0 +1,5 @@
+def hello():
+    print("Hello, world!")
+
+def goodbye():
+    print("Goodbye!")
diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,2 +1,2 @@
 def main():
-    print("old")
+    print("new")
"""


@pytest.fixture
def make_response():
    """Build a fake requests.Response."""

    def _make(status_code=200, json_data=None, text=None, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.text = text if text is not None else ""
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def chat_completion():
    """Build a chat-completion response document."""

    def _make(content="Add greeting helpers", finish_reason="stop"):
        return {
            "id": "chatcmpl-1",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": finish_reason,
                }
            ],
            "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
        }

    return _make


@pytest.fixture
def mock_completed_process():
    """Build a fake subprocess.CompletedProcess."""

    def _make(returncode=0, stdout="", stderr=""):
        result = MagicMock()
        result.returncode = returncode
        result.stdout = stdout
        result.stderr = stderr
        return result

    return _make
