import httpx

from freshness import Headers, Response
from freshness.httpx import freshness_of, httpx_to_internal, internal_to_httpx


def test_freshness_of_writes_into_httpx_headers(clock):
    response = httpx.Response(200, headers={"Cache-Control": "max-age=3600"}, content=b"ok")

    freshness = freshness_of(response, clock=clock)

    assert freshness.is_fresh
    assert freshness.is_cacheable
    assert freshness.ttl == 3600
    assert response.headers["date"] == "Tue, 25 Aug 2015 12:00:00 GMT"
    assert response.headers["age"] == "0"


def test_freshness_of_cached_httpx_response(clock):
    response = httpx.Response(
        200,
        headers={
            "Cache-Control": "max-age=100, must-revalidate",
            "Date": "Tue, 25 Aug 2015 11:58:20 GMT",
            "Age": "100",
        },
    )

    freshness = freshness_of(response, clock=clock)

    assert freshness.age == 100
    assert freshness.is_stale
    assert freshness.must_revalidate is True


def test_freshness_of_logs(clock, caplog):
    with caplog.at_level("DEBUG", logger="freshness.httpx"):
        freshness_of(httpx.Response(500), clock=clock)

    assert caplog.messages == ["Calculating freshness of an httpx response with status code 500."]


def test_httpx_to_internal(clock):
    response = httpx.Response(
        203,
        headers=[("Cache-Control", "public"), ("Cache-Control", "max-age=60")],
        content=b"hello",
    )

    internal = httpx_to_internal(response, clock=clock)

    assert internal.status_code == 203
    assert internal.headers.get_list("cache-control") == ["public", "max-age=60"]
    assert internal.freshness.cache_control == {"public": True, "max-age": 60}
    assert internal.read() == b"hello"
    assert "age" not in response.headers


def test_internal_to_httpx(clock):
    internal = Response(
        status_code=200,
        headers=Headers({"Cache-Control": "max-age=60"}),
        stream=iter([b"hel", b"lo"]),
        clock=clock,
    )

    response = internal_to_httpx(internal)

    assert response.status_code == 200
    assert response.content == b"hello"
    assert response.headers["cache-control"] == "max-age=60"
    assert response.headers["age"] == "0"
    assert response.headers["date"] == "Tue, 25 Aug 2015 12:00:00 GMT"
