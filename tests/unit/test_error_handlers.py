from fastapi import HTTPException

from trainor.main import app


# Dummy routes
@app.get("/raise-401")
def raise_401():
    raise HTTPException(status_code=401, detail="Nope")


@app.get("/raise-418")
def raise_418():
    raise HTTPException(status_code=418, detail="I am a teapot")


@app.get("/raise-exception")
def raise_exception():
    raise ValueError("Kaboom")


def test_401_returns_json_error(client):
    response = client.get("/raise-401")

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Nope"}


def test_http_exception_keeps_status_and_detail(client):
    response = client.get("/raise-418")

    assert response.status_code == 418
    assert response.json() == {"success": False, "error": "I am a teapot"}


def test_unhandled_exception_returns_gremlins(client):
    response = client.get("/raise-exception")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Gremlins."}
