import json

import httpx
import pytest

from moderation_console.client import AdminApiClient
from moderation_console.errors import AuthenticationFailed, ItemReviewFailed, ListFetchFailed
from moderation_console.schemas import Credential, PostUpdateRequest, ReviewStatusRequest
from tests.conftest import make_post

CREDENTIAL = Credential(username="alice", password="pw-a", code_2fa="222")


@pytest.mark.asyncio
async def test_login_posts_credential_and_returns_token(settings, fake_api) -> None:
    client = AdminApiClient(settings, transport=fake_api.transport())

    token = await client.login(CREDENTIAL)

    assert token == "token-abc"
    [request] = fake_api.calls("POST", "/user/login")
    assert json.loads(request.content) == {"username": "alice", "password": "pw-a", "code2FA": "222"}


@pytest.mark.asyncio
async def test_login_non_success_status_is_authentication_failure(settings, fake_api) -> None:
    fake_api.login_status = 401
    client = AdminApiClient(settings, transport=fake_api.transport())

    with pytest.raises(AuthenticationFailed):
        await client.login(CREDENTIAL)


@pytest.mark.asyncio
async def test_login_without_token_field_is_authentication_failure(settings, fake_api) -> None:
    fake_api.login_body = {"message": "ok"}
    client = AdminApiClient(settings, transport=fake_api.transport())

    with pytest.raises(AuthenticationFailed, match="No access token"):
        await client.login(CREDENTIAL)


@pytest.mark.asyncio
async def test_login_network_error_is_authentication_failure(settings) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = AdminApiClient(settings, transport=httpx.MockTransport(_refuse))

    with pytest.raises(AuthenticationFailed):
        await client.login(CREDENTIAL)


@pytest.mark.asyncio
async def test_list_posts_sends_queue_filter_and_auth_header(settings, fake_api) -> None:
    fake_api.set_page(2, [make_post("1")], total=21)
    client = AdminApiClient(settings, transport=fake_api.transport())

    page = await client.list_posts("token-abc", page=2, page_size=20)

    assert [post.id for post in page.items] == ["1"]
    assert page.total == 21
    [request] = fake_api.calls("GET", "/post")
    assert request.headers["authcat"] == "Bearer token-abc"
    assert dict(request.url.params) == {
        "protectionLv": "2",
        "dateRangeType": "1",
        "reviewStatus": "1",
        "current": "2",
        "pageSize": "20",
    }


@pytest.mark.asyncio
async def test_list_posts_failure_raises_list_fetch_failed(settings, fake_api) -> None:
    fake_api.list_status = 500
    client = AdminApiClient(settings, transport=fake_api.transport())

    with pytest.raises(ListFetchFailed):
        await client.list_posts("token-abc", page=1, page_size=20)


@pytest.mark.asyncio
async def test_auth_header_name_is_configurable(settings, fake_api) -> None:
    settings = settings.model_copy(update={"api_auth_header": "Authorization"})
    client = AdminApiClient(settings, transport=fake_api.transport())

    await client.list_posts("token-abc", page=1, page_size=20)

    [request] = fake_api.calls("GET", "/post")
    assert request.headers["Authorization"] == "Bearer token-abc"


@pytest.mark.asyncio
async def test_review_writes_send_expected_bodies(settings, fake_api) -> None:
    client = AdminApiClient(settings, transport=fake_api.transport())

    await client.set_review_status("token-abc", ReviewStatusRequest(post_ids=["9"], review_status=3))
    await client.update_post("token-abc", PostUpdateRequest(content="hi", member_id="m1", post_id="9"))

    [review] = fake_api.calls("PUT", "/post/review")
    [update] = fake_api.calls("PUT", "/post")
    assert json.loads(review.content) == {"postIDs": ["9"], "reviewStatus": 3}
    assert json.loads(update.content)["memberID"] == "m1"
    assert update.headers["authcat"] == "Bearer token-abc"


@pytest.mark.asyncio
async def test_review_write_failure_raises_item_review_failed(settings, fake_api) -> None:
    fake_api.update_status = 502
    client = AdminApiClient(settings, transport=fake_api.transport())

    with pytest.raises(ItemReviewFailed):
        await client.update_post("token-abc", PostUpdateRequest(content="hi", member_id="m1", post_id="9"))
