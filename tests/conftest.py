import pytest

from facebox.core.models import FaceDetector
from facebox.core.workers import WorkerPool

from tests.helpers import FakeEngineSession, make_jpeg


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_session():
    return FakeEngineSession()


@pytest.fixture
def face_detector(fake_session):
    return FaceDetector(session=fake_session)


@pytest.fixture
def worker_pool():
    pool = WorkerPool(max_workers=4, max_queue=64)
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def jpeg_bytes():
    return make_jpeg()
