import threading

from llm_wrapper import ProviderError


class FakeGenerator:
    """Records each agent call and answers with a canned string."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.calls = []
        self._lock = threading.Lock()

    def generate(self, prompt, substitutions):
        with self._lock:
            self.calls.append((prompt.name, dict(substitutions)))
        if prompt.name == self.fail_on:
            raise ProviderError(f"{prompt.name} agent call failed: quota exceeded")
        return f"{prompt.name} says hello"
