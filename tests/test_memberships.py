"""Tests for the space memberships service."""

import json

import pytest

from conftest import SPACE_ID, assert_headers, fixture_json, json_response, payload_response
from contentful_cma import Link, Membership, Sys
from contentful_cma.core.errors import BadRequestError, NotFoundError, ValidationFailedError


def membership_from_fixture():
    return Membership.model_validate(fixture_json("membership_1.json"))


class TestMembershipsService:
    def test_list(self, make_cma):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == f"/spaces/{SPACE_ID}/space_memberships"
            assert_headers(request)
            return json_response(200, "membership.json")

        cma = make_cma(handler)
        collection = cma.memberships.list(SPACE_ID).next()

        assert len(collection.items) == 2
        assert collection.items[0].email == "test@contentfulsdk.go"
        assert collection.items[0].roles[0].id == "1ElgCn1mi1UHSBLTP2v4TD"

    def test_memberships_ignore_environment(self, make_cma):
        def handler(request):
            assert request.url.path == f"/spaces/{SPACE_ID}/space_memberships"
            return json_response(200, "membership.json")

        cma = make_cma(handler, environment="staging")
        assert len(cma.memberships.list(SPACE_ID).next().items) == 2

    def test_get(self, make_cma):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == f"/spaces/{SPACE_ID}/space_memberships/0xWanD4AZI2AR35wW9q51n"
            assert_headers(request)
            return json_response(200, "membership_1.json")

        cma = make_cma(handler)
        membership = cma.memberships.get(SPACE_ID, "0xWanD4AZI2AR35wW9q51n")

        assert membership.sys.id == "0xWanD4AZI2AR35wW9q51n"

    def test_get_bad_request_raises(self, make_cma):
        cma = make_cma(lambda request: json_response(400, "membership_1.json"))

        with pytest.raises(BadRequestError):
            cma.memberships.get(SPACE_ID, "0xWanD4AZI2AR35wW9q51n")

    def test_get_not_found_carries_api_error(self, make_cma):
        cma = make_cma(lambda request: json_response(404, "error_not_found.json"))

        with pytest.raises(NotFoundError) as exc_info:
            cma.memberships.get(SPACE_ID, "missing")

        error = exc_info.value
        assert error.status_code == 404
        assert error.error_id == "NotFound"
        assert error.error.request_id == "cb1c4a41-9d88-4b41-a6fe-6eab4f1a4e18"
        assert "could not be found" in str(error)

    def test_upsert_create(self, make_cma):
        def handler(request):
            assert request.method == "POST"
            assert request.url.path == f"/spaces/{SPACE_ID}/space_memberships"
            assert_headers(request)

            payload = json.loads(request.content)
            assert payload["email"] == "johndoe@nonexistent.com"
            assert payload["admin"] is True
            assert payload["roles"][0]["sys"]["linkType"] == "Role"
            return json_response(200, "membership_1.json")

        cma = make_cma(handler)
        membership = Membership(
            admin=True,
            roles=[Link.to("Role", "1ElgCn1mi1UHSBLTP2v4TD")],
            email="johndoe@nonexistent.com",
        )

        cma.memberships.upsert(SPACE_ID, membership)

        assert membership.sys.id == "0xWanD4AZI2AR35wW9q51n"

    def test_upsert_update(self, make_cma):
        def handler(request):
            assert request.method == "PUT"
            assert request.url.path == f"/spaces/{SPACE_ID}/space_memberships/0xWanD4AZI2AR35wW9q51n"
            assert request.headers["X-Contentful-Version"] == "3"
            assert_headers(request)

            payload = json.loads(request.content)
            assert payload["email"] == "editedmail@examplemail.com"
            echoed = fixture_json("membership_1.json")
            echoed["email"] = payload["email"]
            echoed["sys"]["version"] = 4
            return payload_response(200, echoed)

        cma = make_cma(handler)
        membership = membership_from_fixture()
        membership.email = "editedmail@examplemail.com"

        cma.memberships.upsert(SPACE_ID, membership)

        assert membership.email == "editedmail@examplemail.com"
        assert membership.sys.version == 4

    def test_failed_create_keeps_entity_new(self, make_cma):
        cma = make_cma(lambda request: json_response(422))
        membership = Membership(email="johndoe@nonexistent.com")

        with pytest.raises(ValidationFailedError) as exc_info:
            cma.memberships.upsert(SPACE_ID, membership)

        assert exc_info.value.status_code == 422
        assert exc_info.value.error is None
        assert membership.sys.id is None
        assert membership.is_new()

    def test_delete(self, make_cma):
        def handler(request):
            assert request.method == "DELETE"
            assert request.url.path == f"/spaces/{SPACE_ID}/space_memberships/0xWanD4AZI2AR35wW9q51n"
            assert_headers(request)
            return json_response(200)

        cma = make_cma(handler)
        membership = membership_from_fixture()

        cma.memberships.delete(SPACE_ID, membership.sys.id)

    def test_update_without_version_is_not_sent(self, make_cma):
        cma = make_cma(lambda request: pytest.fail("no request expected"))
        membership = Membership(sys=Sys(id="0xWanD4AZI2AR35wW9q51n"), email="editedmail@examplemail.com")

        with pytest.raises(ValueError):
            cma.memberships.upsert(SPACE_ID, membership)

        assert membership.sys.version is None
