import re

CODE_PATTERN = re.compile(r"Code: (\d{6})")
TOKEN_PATTERN = re.compile(r"Token: ([0-9A-F]{64})")
RESET_PATTERN = re.compile(r"/authentication/reset/([0-9A-F]{64})")


def last_confirmation(mailer, email):
    message = [m for m in mailer.outbox if m.to == email][-1]
    return {
        "email": email,
        "code": int(CODE_PATTERN.search(message.html).group(1)),
        "token": TOKEN_PATTERN.search(message.html).group(1),
    }


def last_reset_token(mailer, email):
    message = [m for m in mailer.outbox if m.to == email][-1]
    return RESET_PATTERN.search(message.html).group(1)


async def signup_and_confirm(client, mailer, payload):
    response = await client.post("/api/authentication/signup", json=payload)
    assert response.status_code == 201

    response = await client.post(
        "/api/authentication/confirm", json=last_confirmation(mailer, payload["email"])
    )
    assert response.status_code == 200
    return response.json()["data"]["token"]
