"""Route tests for /veiculos against the in-memory service fake."""

from datetime import date

from minimal_api.models import Veiculo

FUSCA = {"nome": "Fusca", "marca": "Volkswagen", "ano": 1970}


def seed(veiculos, total):
    for i in range(total):
        veiculos.add(Veiculo(nome=f"Modelo {i}", marca="Marca", ano=2000))


class TestAuthentication:
    def test_missing_token_is_unauthorized(self, client):
        assert client.get("/veiculos").status_code == 401

    def test_garbage_token_is_unauthorized(self, client):
        response = client.get("/veiculos", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_user_may_create_and_read(self, client, user_headers):
        created = client.post("/veiculos", json=FUSCA, headers=user_headers)
        assert created.status_code == 201
        assert client.get(f"/veiculos/{created.json()['id']}", headers=user_headers).status_code == 200

    def test_user_may_not_update_or_delete(self, client, veiculos, user_headers):
        seed(veiculos, 1)
        assert client.put("/veiculos/1", json=FUSCA, headers=user_headers).status_code == 403
        assert client.delete("/veiculos/1", headers=user_headers).status_code == 403
        assert veiculos.find_by_id(1) is not None


class TestCreate:
    def test_created_with_location(self, client, admin_headers):
        response = client.post("/veiculos", json=FUSCA, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body == {"id": 1, **FUSCA}
        assert response.headers["Location"] == "/veiculos/1"

    def test_year_out_of_range(self, client, admin_headers):
        ano = date.today().year + 1
        response = client.post("/veiculos", json={**FUSCA, "ano": ano}, headers=admin_headers)

        assert response.status_code == 400
        assert any("ano" in m for m in response.json()["mensagens"])

    def test_year_before_1900(self, client, admin_headers):
        response = client.post("/veiculos", json={**FUSCA, "ano": 1899}, headers=admin_headers)
        assert response.status_code == 400

    def test_short_brand(self, client, veiculos, admin_headers):
        response = client.post("/veiculos", json={**FUSCA, "marca": "VW"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["mensagens"] == ["A marca do veículo deve conter ao menos 3 caracteres."]
        assert veiculos.rows == {}

    def test_wrongly_typed_body_uses_message_shape(self, client, admin_headers):
        response = client.post("/veiculos", json={**FUSCA, "ano": "mil"}, headers=admin_headers)

        assert response.status_code == 400
        assert len(response.json()["mensagens"]) == 1


class TestRead:
    def test_round_trip(self, client, admin_headers):
        created = client.post("/veiculos", json=FUSCA, headers=admin_headers).json()
        fetched = client.get(f"/veiculos/{created['id']}", headers=admin_headers)

        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_missing_is_404(self, client, admin_headers):
        assert client.get("/veiculos/42", headers=admin_headers).status_code == 404

    def test_pagination(self, client, veiculos, admin_headers):
        seed(veiculos, 15)

        first = client.get("/veiculos", params={"pagina": 1}, headers=admin_headers).json()
        second = client.get("/veiculos", params={"pagina": 2}, headers=admin_headers).json()

        assert len(first) == 10
        assert len(second) == 5
        assert {v["id"] for v in first} | {v["id"] for v in second} == set(range(1, 16))

    def test_page_defaults_to_first(self, client, veiculos, admin_headers):
        seed(veiculos, 12)
        assert len(client.get("/veiculos", headers=admin_headers).json()) == 10

    def test_page_zero_is_bad_request(self, client, admin_headers):
        response = client.get("/veiculos", params={"pagina": 0}, headers=admin_headers)
        assert response.status_code == 400

    def test_name_filter(self, client, veiculos, admin_headers):
        veiculos.add(Veiculo(nome="Fusca", marca="Volkswagen", ano=1970))
        veiculos.add(Veiculo(nome="Opala", marca="Chevrolet", ano=1975))

        response = client.get("/veiculos", params={"nome": "OPA"}, headers=admin_headers)

        assert [v["nome"] for v in response.json()] == ["Opala"]


class TestUpdate:
    def test_full_replace(self, client, veiculos, admin_headers):
        seed(veiculos, 1)
        novo = {"nome": "Brasilia", "marca": "Volkswagen", "ano": 1978}

        response = client.put("/veiculos/1", json=novo, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"id": 1, **novo}
        assert veiculos.find_by_id(1).nome == "Brasilia"

    def test_missing_checked_before_validation(self, client, admin_headers):
        response = client.put("/veiculos/7", json={"nome": "", "marca": "", "ano": 0}, headers=admin_headers)
        assert response.status_code == 404

    def test_invalid_body(self, client, veiculos, admin_headers):
        seed(veiculos, 1)
        response = client.put("/veiculos/1", json={**FUSCA, "ano": 1800}, headers=admin_headers)

        assert response.status_code == 400
        assert veiculos.find_by_id(1).ano == 2000


class TestDelete:
    def test_delete_then_404(self, client, veiculos, admin_headers):
        seed(veiculos, 1)

        assert client.delete("/veiculos/1", headers=admin_headers).status_code == 204
        assert client.get("/veiculos/1", headers=admin_headers).status_code == 404

    def test_delete_missing(self, client, admin_headers):
        assert client.delete("/veiculos/1", headers=admin_headers).status_code == 404
