"""
tests.test_podcasts_api

End-to-end tests for podcast/episode CRUD, the Host role guard, and ownership checks.
"""

from __future__ import annotations

import pytest
import pytest_asyncio

CREATE_PODCAST = """
mutation {
  createPodcast(input: {title: "%s", category: "%s"}) { ok error id }
}
"""

CREATE_EPISODE = """
mutation {
  createEpisode(input: {title: "%s", category: "%s", podcastId: %d}) { ok error id }
}
"""

UPDATE_PODCAST = """
mutation {
  updatePodcast(input: {id: %d, payload: {%s}}) { ok error }
}
"""

UPDATE_EPISODE = """
mutation {
  updateEpisode(input: {podcastId: %d, episodeId: %d, title: "%s", category: "%s"}) { ok error }
}
"""

DELETE_EPISODE = "mutation { deleteEpisode(input: {podcastId: %d, episodeId: %d}) { ok error } }"
DELETE_PODCAST = "mutation { deletePodcast(input: {id: %d}) { ok error } }"
GET_PODCAST = "{ getPodcast(input: {id: %d}) { ok error podcast { id title category rating } } }"
GET_EPISODES = "{ getEpisodes(input: {id: %d}) { ok error episodes { id title category } } }"

OK = {"ok": True, "error": None}


async def _create_podcast(gql, token: str, title: str = "test podcast") -> int:
    body = await gql.execute(CREATE_PODCAST % (title, "test"), token=token)
    result = body["data"]["createPodcast"]
    assert result["ok"] is True
    assert result["error"] is None
    assert isinstance(result["id"], int)
    return result["id"]


async def _create_episode(gql, token: str, podcast_id: int) -> int:
    body = await gql.execute(CREATE_EPISODE % ("test episode", "test", podcast_id), token=token)
    result = body["data"]["createEpisode"]
    assert result["ok"] is True
    return result["id"]


@pytest_asyncio.fixture
async def other_host_token(signup) -> str:
    return await signup("other-host@podcasts.test")


@pytest.mark.asyncio
async def test_podcast_lifecycle(gql, host_token) -> None:
    podcast_id = await _create_podcast(gql, host_token)
    episode_id = await _create_episode(gql, host_token, podcast_id)

    body = await gql.execute(
        "{ getAllPodcasts { ok error podcasts { id episodes { id } } } }", token=host_token
    )
    result = body["data"]["getAllPodcasts"]
    assert result["ok"] is True
    assert result["podcasts"] == [{"id": podcast_id, "episodes": [{"id": episode_id}]}]

    body = await gql.execute(GET_PODCAST % podcast_id, token=host_token)
    assert body["data"]["getPodcast"]["podcast"]["title"] == "test podcast"
    assert body["data"]["getPodcast"]["podcast"]["rating"] == 0

    body = await gql.execute(GET_EPISODES % podcast_id, token=host_token)
    assert [e["id"] for e in body["data"]["getEpisodes"]["episodes"]] == [episode_id]

    body = await gql.execute(
        UPDATE_PODCAST % (podcast_id, 'title: "test2 title", category: "test2", rating: 5'),
        token=host_token,
    )
    assert body["data"]["updatePodcast"] == OK
    body = await gql.execute(GET_PODCAST % podcast_id, token=host_token)
    assert body["data"]["getPodcast"]["podcast"] == {
        "id": podcast_id,
        "title": "test2 title",
        "category": "test2",
        "rating": 5,
    }

    body = await gql.execute(
        UPDATE_EPISODE % (podcast_id, episode_id, "test2 title", "test2"), token=host_token
    )
    assert body["data"]["updateEpisode"] == OK
    body = await gql.execute(GET_EPISODES % podcast_id, token=host_token)
    assert body["data"]["getEpisodes"]["episodes"] == [
        {"id": episode_id, "title": "test2 title", "category": "test2"}
    ]

    body = await gql.execute(DELETE_EPISODE % (podcast_id, episode_id), token=host_token)
    assert body["data"]["deleteEpisode"] == OK
    body = await gql.execute(GET_EPISODES % podcast_id, token=host_token)
    assert body["data"]["getEpisodes"]["episodes"] == []

    body = await gql.execute(DELETE_PODCAST % podcast_id, token=host_token)
    assert body["data"]["deletePodcast"] == OK
    body = await gql.execute(GET_PODCAST % podcast_id, token=host_token)
    assert body["data"]["getPodcast"]["ok"] is False


@pytest.mark.asyncio
async def test_partial_podcast_update_keeps_other_fields(gql, host_token) -> None:
    podcast_id = await _create_podcast(gql, host_token, title="keep me")
    body = await gql.execute(UPDATE_PODCAST % (podcast_id, "rating: 3"), token=host_token)
    assert body["data"]["updatePodcast"] == OK

    podcast = (await gql.execute(GET_PODCAST % podcast_id, token=host_token))["data"]["getPodcast"][
        "podcast"
    ]
    assert podcast["title"] == "keep me"
    assert podcast["rating"] == 3


@pytest.mark.asyncio
async def test_rating_out_of_range_is_rejected(gql, host_token) -> None:
    podcast_id = await _create_podcast(gql, host_token)
    body = await gql.execute(UPDATE_PODCAST % (podcast_id, "rating: 6"), token=host_token)
    result = body["data"]["updatePodcast"]
    assert result["ok"] is False
    assert "Rating" in result["error"]


@pytest.mark.asyncio
async def test_deleting_podcast_removes_its_episodes(gql, host_token) -> None:
    podcast_id = await _create_podcast(gql, host_token)
    await _create_episode(gql, host_token, podcast_id)

    body = await gql.execute(DELETE_PODCAST % podcast_id, token=host_token)
    assert body["data"]["deletePodcast"] == OK

    body = await gql.execute(GET_EPISODES % podcast_id, token=host_token)
    assert body["data"]["getEpisodes"]["ok"] is False
    assert body["data"]["getEpisodes"]["episodes"] is None


@pytest.mark.asyncio
async def test_missing_podcast_returns_not_ok(gql, host_token) -> None:
    body = await gql.execute(GET_PODCAST % 999, token=host_token)
    result = body["data"]["getPodcast"]
    assert result["ok"] is False
    assert isinstance(result["error"], str)
    assert result["podcast"] is None

    body = await gql.execute(CREATE_EPISODE % ("t", "c", 999), token=host_token)
    assert body["data"]["createEpisode"]["ok"] is False
    assert body["data"]["createEpisode"]["id"] is None


@pytest.mark.asyncio
async def test_episode_must_belong_to_the_given_podcast(gql, host_token) -> None:
    first = await _create_podcast(gql, host_token, title="first")
    second = await _create_podcast(gql, host_token, title="second")
    episode_id = await _create_episode(gql, host_token, first)

    body = await gql.execute(DELETE_EPISODE % (second, episode_id), token=host_token)
    result = body["data"]["deleteEpisode"]
    assert result["ok"] is False
    assert "not found" in result["error"]


@pytest.mark.asyncio
async def test_only_the_owning_host_can_mutate(gql, host_token, other_host_token) -> None:
    podcast_id = await _create_podcast(gql, host_token)
    episode_id = await _create_episode(gql, host_token, podcast_id)

    mutations = {
        "updatePodcast": UPDATE_PODCAST % (podcast_id, 'title: "hijacked"'),
        "createEpisode": CREATE_EPISODE % ("intruder", "x", podcast_id),
        "updateEpisode": UPDATE_EPISODE % (podcast_id, episode_id, "hijacked", "x"),
        "deleteEpisode": DELETE_EPISODE % (podcast_id, episode_id),
        "deletePodcast": DELETE_PODCAST % podcast_id,
    }
    for name, query in mutations.items():
        body = await gql.execute(query, token=other_host_token)
        result = body["data"][name]
        assert result["ok"] is False, name
        assert isinstance(result["error"], str), name

    body = await gql.execute(GET_PODCAST % podcast_id, token=host_token)
    assert body["data"]["getPodcast"]["podcast"]["title"] == "test podcast"
    body = await gql.execute(GET_EPISODES % podcast_id, token=host_token)
    assert [e["id"] for e in body["data"]["getEpisodes"]["episodes"]] == [episode_id]


@pytest.mark.asyncio
async def test_listener_cannot_create_podcast(gql, signup) -> None:
    token = await signup("listener@podcasts.test", role="Listener")
    body = await gql.execute(CREATE_PODCAST % ("nope", "nope"), token=token)
    assert body["errors"][0]["message"] == "Forbidden resource"
    assert body["data"] is None


@pytest.mark.asyncio
async def test_listener_can_read_podcasts(gql, signup, host_token) -> None:
    podcast_id = await _create_podcast(gql, host_token)
    token = await signup("listener@podcasts.test", role="Listener")

    body = await gql.execute(GET_PODCAST % podcast_id, token=token)
    assert body["data"]["getPodcast"]["ok"] is True


@pytest.mark.asyncio
async def test_podcast_operations_require_token(gql) -> None:
    for query in ("{ getAllPodcasts { ok } }", CREATE_PODCAST % ("t", "c")):
        body = await gql.execute(query)
        assert body["errors"][0]["message"] == "Forbidden resource"
        assert body["data"] is None


@pytest.mark.asyncio
async def test_blank_title_or_category_is_rejected(gql, host_token) -> None:
    body = await gql.execute(CREATE_PODCAST % ("", ""), token=host_token)
    result = body["data"]["createPodcast"]
    assert result["ok"] is False
    assert isinstance(result["error"], str)
    assert result["id"] is None

    podcast_id = await _create_podcast(gql, host_token)
    body = await gql.execute(CREATE_EPISODE % ("   ", "test", podcast_id), token=host_token)
    assert body["data"]["createEpisode"]["ok"] is False

    body = await gql.execute(UPDATE_PODCAST % (podcast_id, 'title: ""'), token=host_token)
    assert body["data"]["updatePodcast"]["ok"] is False
    body = await gql.execute(GET_PODCAST % podcast_id, token=host_token)
    assert body["data"]["getPodcast"]["podcast"]["title"] == "test podcast"
