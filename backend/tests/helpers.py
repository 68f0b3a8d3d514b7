def login(client, account="test", password="1234"):
    return client.post(
        "/member/login",
        data={"username": account, "password": password},
        follow_redirects=False,
    )
