import socket
import threading
from unittest.mock import Mock

import pytest
import redis
from kubernetes.client import CoreV1Api, V1Node, V1ObjectMeta

from appmeta.core.config import Settings


def make_node(name="node1", labels=None):
    return V1Node(metadata=V1ObjectMeta(name=name, labels=labels))


@pytest.fixture
def identity_env() -> dict[str, str]:
    return {
        "HOST": "node1",
        "JOB": "j1",
        "TASK": "t1",
        "PLUGIN": "p1",
        "WAGGLE_APP_ID": "app42",
    }


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def api() -> Mock:
    mockapi = Mock(spec=CoreV1Api)
    mockapi.read_node.return_value = make_node(labels={"zone": "us-east"})
    return mockapi


@pytest.fixture
def rdb() -> Mock:
    mockrdb = Mock(spec=redis.Redis)
    mockrdb.set.return_value = True
    return mockrdb


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in ("DRY_RUN", "APP_META_CACHE_HOST", "APP_META_CACHE_PORT", "APP_META_CACHE_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("APP_META_CONFIG", str(tmp_path / "missing.yml"))


@pytest.fixture
def silent_server():
    """TCP server that accepts connections and never replies. Yields (port, accepted)."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(16)
    listener.settimeout(0.1)
    accepted = []
    stop = threading.Event()

    def serve():
        while True:
            try:
                conn, _ = listener.accept()
                accepted.append(conn)
            except socket.timeout:
                if stop.is_set():
                    return

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield listener.getsockname()[1], accepted
    stop.set()
    thread.join(timeout=2)
    for conn in accepted:
        conn.close()
    listener.close()
