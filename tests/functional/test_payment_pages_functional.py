def test_success_page_shows_identifiers(client, fake_arifpay):
    res = client.get("/payment/success", params={"userId": "u1", "gymId": "g1", "planId": "p1"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    for value in ("u1", "g1", "p1"):
        assert value in res.text
    assert "Payment Successful" in res.text
    # Page d'affichage seulement
    assert fake_arifpay.calls == []


def test_success_page_escapes_query_values(client):
    res = client.get("/payment/success", params={"userId": "<script>alert(1)</script>", "gymId": "g1", "planId": "p1"})
    assert res.status_code == 200
    assert "<script>alert(1)</script>" not in res.text
    assert "&lt;script&gt;" in res.text


def test_success_page_without_parameters(client):
    res = client.get("/payment/success")
    assert res.status_code == 200
    assert "Payment Successful" in res.text


def test_cancel_page(client):
    res = client.get("/payment/cancel", params={"userId": "u1", "subscriptionId": "p1"})
    assert res.status_code == 200
    assert "Payment Cancelled" in res.text
    assert "You cancelled the payment." in res.text


def test_error_page(client):
    res = client.get("/payment/error")
    assert res.status_code == 200
    assert "Payment Error" in res.text
    assert "Something went wrong with the payment." in res.text
