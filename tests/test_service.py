"""Unit tests for RealStateService against a mocked repository."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from core.errors import InternalError, NotFoundError
from realstate.schemas import RealState
from realstate.service import RealStateService


@pytest.fixture
def repo():
    return AsyncMock()


@pytest.fixture
def service(repo):
    return RealStateService(repo)


class TestCreate:
    def test_sets_generated_id_on_returned_entity(self, repo, service, elm_street_payload, elm_street):
        repo.create.return_value = 1

        result = asyncio.run(service.create(elm_street_payload))

        assert result == elm_street
        repo.create.assert_awaited_once_with(elm_street_payload)

    def test_repository_error_propagates_unchanged(self, repo, service, elm_street_payload):
        err = InternalError()
        repo.create.side_effect = err

        with pytest.raises(InternalError) as exc_info:
            asyncio.run(service.create(elm_street_payload))

        assert exc_info.value is err


class TestGet:
    def test_returns_repository_entity(self, repo, service, elm_street):
        repo.get.return_value = elm_street

        assert asyncio.run(service.get(1)) == elm_street
        repo.get.assert_awaited_once_with(1)

    def test_not_found_propagates(self, repo, service):
        repo.get.side_effect = NotFoundError()

        with pytest.raises(NotFoundError):
            asyncio.run(service.get(999))


class TestUpdate:
    def test_checks_existence_then_writes(self, repo, service, elm_street_payload, elm_street):
        repo.get.return_value = elm_street
        repo.update.return_value = RealState.from_payload(elm_street_payload)

        result = asyncio.run(service.update(elm_street_payload, 1))

        assert result == elm_street
        repo.get.assert_awaited_once_with(1)
        repo.update.assert_awaited_once_with(elm_street_payload, 1)

    def test_id_comes_from_path(self, repo, service, elm_street_payload, elm_street):
        repo.get.return_value = elm_street.model_copy(update={"id": 8})
        repo.update.return_value = RealState.from_payload(elm_street_payload)

        result = asyncio.run(service.update(elm_street_payload, 8))

        assert result.id == 8

    def test_missing_row_short_circuits_write(self, repo, service, elm_street_payload):
        repo.get.side_effect = NotFoundError()

        with pytest.raises(NotFoundError):
            asyncio.run(service.update(elm_street_payload, 999))

        repo.update.assert_not_awaited()

    def test_existence_check_failure_short_circuits_write(self, repo, service, elm_street_payload):
        repo.get.side_effect = InternalError()

        with pytest.raises(InternalError):
            asyncio.run(service.update(elm_street_payload, 1))

        repo.update.assert_not_awaited()

    def test_write_failure_propagates(self, repo, service, elm_street_payload, elm_street):
        repo.get.return_value = elm_street
        repo.update.side_effect = InternalError()

        with pytest.raises(InternalError):
            asyncio.run(service.update(elm_street_payload, 1))


class TestDelete:
    def test_delegates_without_existence_check(self, repo, service):
        asyncio.run(service.delete(1))

        repo.delete.assert_awaited_once_with(1)
        repo.get.assert_not_awaited()

    def test_error_propagates(self, repo, service):
        repo.delete.side_effect = InternalError()

        with pytest.raises(InternalError):
            asyncio.run(service.delete(1))
