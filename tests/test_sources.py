from __future__ import annotations

import uuid
from datetime import timedelta

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app.core.config import Settings
from app.core.errors import InvalidObservationError, MonitorSourceError
from app.core.models import Status
from app.db.models import Base, CheckResult, Target
from app.sources.api import ApiMonitorSource
from app.sources.database import DatabaseMonitorSource
from app.sources.factory import build_monitor_source

MONITORS = [
    {
        "_id": "a1",
        "name": "Shop",
        "url": "https://shop.example.com",
        "status": "up",
        "history": [
            {"timestamp": "2026-10-18T11:50:00.000Z", "status": "down"},
            {"timestamp": "2026-10-18T11:55:00.000Z", "status": "up"},
        ],
    },
    {"_id": "b2", "name": "API", "url": "https://api.example.com", "status": "down", "history": []},
]


def api_source(handler) -> ApiMonitorSource:
    return ApiMonitorSource(
        "http://collector.test/",
        client_factory=lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_api_source_lists_monitors():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=MONITORS)

    monitors = await api_source(handler).list_monitors()

    assert seen == ["http://collector.test/monitors"]
    assert [m.id for m in monitors] == ["a1", "b2"]
    assert [o.status for o in monitors[0].history] == [Status.DOWN, Status.UP]


@pytest.mark.asyncio
async def test_api_source_get_monitor():
    source = api_source(lambda request: httpx.Response(200, json=MONITORS))

    assert (await source.get_monitor("b2")).name == "API"
    assert await source.get_monitor("zz") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="boom"),
        httpx.Response(200, text="<html>"),
        httpx.Response(200, json={"monitors": []}),
    ],
)
async def test_api_source_rejects_bad_responses(response):
    with pytest.raises(MonitorSourceError):
        await api_source(lambda request: response).list_monitors()


@pytest.mark.asyncio
async def test_api_source_wraps_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(MonitorSourceError, match="connect_error"):
        await api_source(handler).list_monitors()


@pytest.mark.asyncio
async def test_api_source_rejects_malformed_history():
    payload = [{"_id": "a1", "status": "up", "history": [{"timestamp": "soon", "status": "up"}]}]

    with pytest.raises(InvalidObservationError):
        await api_source(lambda request: httpx.Response(200, json=payload)).list_monitors()


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'checks.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded(session_factory, now):
    shop = Target(id=uuid.uuid4(), name="Shop", url="https://shop.example.com", created_at=now - timedelta(days=2))
    idle = Target(id=uuid.uuid4(), name="Idle", url="https://idle.example.com", created_at=now - timedelta(days=1))
    retired = Target(
        id=uuid.uuid4(),
        name="Retired",
        url="https://old.example.com",
        is_active=False,
        created_at=now - timedelta(days=3),
    )
    async with session_factory() as session:
        async with session.begin():
            session.add_all([shop, idle, retired])
            session.add_all(
                [
                    CheckResult(target_id=shop.id, status=Status.UP, checked_at=now - timedelta(minutes=5)),
                    CheckResult(target_id=shop.id, status=Status.DOWN, checked_at=now - timedelta(minutes=1)),
                    CheckResult(target_id=retired.id, status=Status.UP, checked_at=now - timedelta(minutes=1)),
                ]
            )
    return {"shop": shop.id, "idle": idle.id, "retired": retired.id}


@pytest.mark.asyncio
async def test_database_source_lists_active_targets(session_factory, seeded, now):
    monitors = await DatabaseMonitorSource(session_factory).list_monitors()

    assert [m.name for m in monitors] == ["Shop", "Idle"]
    shop, idle = monitors
    assert shop.id == str(seeded["shop"])
    assert shop.status is Status.DOWN
    assert [o.timestamp for o in shop.history] == [now - timedelta(minutes=5), now - timedelta(minutes=1)]
    assert idle.status is None
    assert idle.history == ()


@pytest.mark.asyncio
async def test_database_source_get_monitor(session_factory, seeded):
    source = DatabaseMonitorSource(session_factory)

    assert (await source.get_monitor(str(seeded["shop"]))).name == "Shop"
    assert await source.get_monitor(str(seeded["retired"])) is None
    assert await source.get_monitor(str(uuid.uuid4())) is None
    assert await source.get_monitor("not-a-uuid") is None


def test_factory_picks_api_source_by_default():
    source = build_monitor_source(Settings(monitors_api_url="http://collector.test"))

    assert isinstance(source, ApiMonitorSource)


def test_factory_requires_database_url():
    with pytest.raises(RuntimeError):
        build_monitor_source(Settings(monitor_source="database", database_url=None))
