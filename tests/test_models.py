from freshness import Headers, Response, activate


def test_response_computes_freshness_on_creation(clock):
    response = Response(
        status_code=200,
        headers=Headers({"Cache-Control": "max-age=60"}),
        clock=clock,
    )

    assert response.freshness.is_fresh
    assert response.freshness.ttl == 60
    assert response.headers["Date"] == "Tue, 25 Aug 2015 12:00:00 GMT"
    assert response.headers["Age"] == "0"


def test_activate(clock):
    raw_headers = {"Cache-Control": "no-store", "Date": "Tue, 25 Aug 2015 11:59:00 GMT", "Age": "10"}

    response = activate((404, raw_headers, b"not found"), clock=clock)

    assert response.status_code == 404
    assert response.freshness.age == 60
    assert not response.freshness.is_original
    assert not response.freshness.is_cacheable
    assert response.read() == b"not found"
    assert raw_headers["Age"] == "10"


def test_activate_with_iterable_body(clock):
    response = activate((200, {}, [b"hello ", b"world"]), clock=clock)

    assert response.read() == b"hello world"
    assert response.read() == b"hello world"


def test_persist(clock):
    response = activate((200, {"Cache-Control": "max-age=60"}, b"body"), clock=clock)

    status_code, headers, body = response.persist()

    assert status_code == 200
    assert headers == Headers(
        {
            "Cache-Control": "max-age=60",
            "Date": "Tue, 25 Aug 2015 12:00:00 GMT",
            "Age": "0",
        }
    )
    assert b"".join(body) == b"body"


def test_persist_after_read(clock):
    response = activate((200, {}, b"body"), clock=clock)
    response.read()

    _, _, body = response.persist()

    assert b"".join(body) == b"body"


def test_equality_ignores_stream(clock):
    first = activate((200, {"Cache-Control": "max-age=60"}, b"one"), clock=clock)
    second = activate((200, {"Cache-Control": "max-age=60"}, b"two"), clock=clock)

    assert first == second
    assert first != activate((404, {"Cache-Control": "max-age=60"}, b"one"), clock=clock)
