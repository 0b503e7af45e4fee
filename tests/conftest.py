from pathlib import Path

import boto3
import pytest
from botocore.stub import Stubber
from fastapi.testclient import TestClient
from sqlmodel import Session, create_engine

from email_builder.main import app
from email_builder.core.database import create_db_and_tables
from email_builder.dependencies import get_db, get_storage, get_image_relay
from email_builder.services import ImageRelay, LocalStorage, TemplateStore


class FakeS3Client:
    """Stands in for the boto3 S3 client; remembers what it was asked to store."""

    def __init__(self):
        self.calls = []

    def put_object(self, Bucket, Key, Body, ContentType=None):
        # Record whether the staged file was still present during the remote call
        self.calls.append({
            "bucket": Bucket,
            "key": Key,
            "body": Body.read(),
            "content_type": ContentType,
            "existed": Path(Body.name).exists(),
        })
        return {"ETag": '"fake"'}


@pytest.fixture
def engine(tmp_path):
    """
    Creates an isolated SQLite database file for each test.
    """
    test_engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    create_db_and_tables(test_engine)
    yield test_engine
    test_engine.dispose()

@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session

@pytest.fixture
def store(session):
    return TemplateStore(session)

@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "uploads", tmp_path / "downloads")

@pytest.fixture
def s3_client():
    return FakeS3Client()

@pytest.fixture
def stubbed_s3():
    """
    A real boto3 S3 client whose responses are queued through botocore's Stubber.
    """
    client = boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber

@pytest.fixture
def relay(s3_client, storage):
    return ImageRelay(
        client_factory=lambda: s3_client,
        bucket="test-bucket",
        public_url="https://images.example.com/",
        storage=storage,
        folder="email_templates",
    )

@pytest.fixture
def client(engine, storage, relay):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_image_relay] = lambda: relay
    yield TestClient(app)
    app.dependency_overrides.clear()
