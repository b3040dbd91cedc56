CLASE = {
    "nombre": "Intermedios mañana",
    "dia_semana": "Martes",
    "hora_inicio": "09:00",
    "hora_fin": "10:30",
    "nivel": "Intermedio (3)",
}


def test_create_clase(client, store):
    response = client.post("/api/clases", json={**CLASE, "profesor": "Luis"})
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Clase creada"
    assert body["data"][0]["profesor"] == "Luis"
    assert len(store.tables["clases"]) == 1


def test_create_clase_sin_profesor(client, store):
    response = client.post("/api/clases", json=CLASE)
    assert response.status_code == 201
    assert "profesor" not in store.tables["clases"][0]


def test_create_clase_faltan_campos(client, store):
    for campo in CLASE:
        body = {k: v for k, v in CLASE.items() if k != campo}
        response = client.post("/api/clases", json=body)
        assert response.status_code == 400, campo
        assert response.json() == {"error": "Todos los campos obligatorios"}
    assert store.tables["clases"] == []


def test_list_clases_ordenadas_por_dia(client, store):
    store.seed("clases", **{**CLASE, "nombre": "B", "dia_semana": 3})
    store.seed("clases", **{**CLASE, "nombre": "A", "dia_semana": 1})

    response = client.get("/api/clases")
    assert response.status_code == 200
    assert [c["nombre"] for c in response.json()] == ["A", "B"]


def test_update_clase_parcial(client, store):
    clase = store.seed("clases", **CLASE)
    response = client.put(f"/api/clases/{clase['id']}", json={"profesor": "Marta"})
    assert response.status_code == 200
    assert response.json()["message"] == "Clase actualizada"
    assert store.tables["clases"][0]["profesor"] == "Marta"
    assert store.tables["clases"][0]["nombre"] == CLASE["nombre"]


def test_update_clase_inexistente_no_es_404(client):
    response = client.put("/api/clases/999", json={"profesor": "Marta"})
    assert response.status_code == 200
    assert response.json() == {"message": "Clase actualizada", "data": []}


def test_delete_clase_inexistente(client):
    response = client.delete("/api/clases/999")
    assert response.status_code == 200
    assert response.json() == {"message": "Clase eliminada"}


def test_update_clase_sin_body(client, store):
    clase = store.seed("clases", **CLASE)
    response = client.put(f"/api/clases/{clase['id']}")
    assert response.status_code == 200
    assert store.tables["clases"][0] == clase
