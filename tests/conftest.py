# tests/conftest.py
"""
Shared pytest fixtures for UICraft tests.

Provides:
- Scripted provider adapters (AsyncMock based, no network)
- Sample component code
- An in-memory version store and an async HTTP client against the app
"""
from datetime import datetime, timezone
from typing import Any, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from uicraft.core.types import GenerationResult
from uicraft.db.versions import VersionRecord, get_version_store, next_version
from uicraft.llm.adapter import ProviderAdapter
from uicraft.main import app
from uicraft.orchestration import get_orchestrator


# ═══════════════════════════════════════════════════════
# SAMPLE DATA
# ═══════════════════════════════════════════════════════

LOGIN_PLAN = {
    "layout": "Container",
    "children": [
        {"component": "Card", "props": {"title": "Sign in"}},
        {"component": "Input", "props": {"label": "Email", "type": "email"}},
        {"component": "Input", "props": {"label": "Password", "type": "password"}},
        {"component": "Button", "props": {"label": "Log in", "variant": "primary"}},
    ],
}

LOGIN_CODE = """```jsx
const App = () => {
  return (
    <Container>
      <Card title="Sign in" />
      <Input label="Email" type="email" />
      <Input label="Password" type="password" />
      <Button label="Log in" variant="primary" />
    </Container>
  );
};
render(<App />);
```"""

PRIOR_BASE = """const App = () => {
  return (
    <Container>
      <Navbar title="Dashboard" />
      <Button label="Save" variant="primary" />
    </Container>
  );
};
render(<App />);
"""


def pad_to(text: str, length: int) -> str:
    filler = "// keep layout "
    while len(text) < length:
        text += filler
    return text[:length]


# ═══════════════════════════════════════════════════════
# FIXTURES - Adapters
# ═══════════════════════════════════════════════════════

def make_adapter(
    name: str,
    plan: Any = None,
    texts: Optional[List[str]] = None,
    plan_error: Optional[Exception] = None,
    text_error: Optional[Exception] = None,
) -> MagicMock:
    """
    Build a scripted adapter.

    texts are returned by successive produce_text calls (code, then explanation).
    """
    adapter = MagicMock(spec=ProviderAdapter)
    adapter.name = name
    adapter.produce_structured_plan = AsyncMock(
        return_value=plan if plan is not None else LOGIN_PLAN,
        side_effect=plan_error,
    )
    if text_error is not None:
        adapter.produce_text = AsyncMock(side_effect=text_error)
    else:
        adapter.produce_text = AsyncMock(side_effect=list(texts or [LOGIN_CODE, "Added a login card."]))
    return adapter


@pytest.fixture
def adapter_factory():
    return make_adapter


@pytest.fixture
def prior_code():
    """A 300-character existing component."""
    code = pad_to(PRIOR_BASE, 300)
    assert len(code) == 300
    return code


# ═══════════════════════════════════════════════════════
# FIXTURES - HTTP
# ═══════════════════════════════════════════════════════

class InMemoryVersionStore:
    """Stand-in for the beanie-backed store."""

    def __init__(self):
        self.records: List[VersionRecord] = []
        self._next_id = 0

    def ensure_available(self) -> None:
        pass

    async def save(self, prompt: str, result: GenerationResult) -> VersionRecord:
        latest = max((r.version for r in self.records), default=None)
        self._next_id += 1
        record = VersionRecord(
            id=f"{self._next_id:024x}",
            prompt=prompt,
            plan=result.plan,
            generatedCode=result.generated_code,
            explanation=result.explanation,
            provider=result.provider,
            version=next_version(latest),
            timestamp=datetime.now(timezone.utc),
        )
        self.records.append(record)
        return record

    async def list_versions(self) -> List[VersionRecord]:
        return sorted(self.records, key=lambda r: (r.timestamp, r.version), reverse=True)

    async def delete(self, version_id: str) -> bool:
        before = len(self.records)
        self.records = [r for r in self.records if r.id != version_id]
        return len(self.records) < before


@pytest.fixture
def version_store():
    return InMemoryVersionStore()


@pytest.fixture
def mock_orchestrator():
    orchestrator = MagicMock()
    orchestrator.generate = AsyncMock(return_value=GenerationResult(
        plan=LOGIN_PLAN,
        generated_code='const App = () => <Card title="Sign in" />;\nrender(<App />);',
        explanation="Added a login card.",
        provider="gemini",
    ))
    return orchestrator


@pytest.fixture
async def async_client(mock_orchestrator, version_store):
    """Async HTTP client with the pipeline and storage replaced."""
    app.dependency_overrides[get_orchestrator] = lambda: mock_orchestrator
    app.dependency_overrides[get_version_store] = lambda: version_store
    limiter_enabled = app.state.limiter.enabled
    app.state.limiter.enabled = False

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.state.limiter.enabled = limiter_enabled
    app.dependency_overrides.clear()
