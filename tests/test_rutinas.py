import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from utils.dates import today_for_input


def _crear_rutina(client, fecha, genero="hombre", descripcion=None):
    r = client.post("/api/rutinas", json={"fecha": fecha, "genero": genero, "descripcion": descripcion})
    assert r.status_code == 201, r.text
    return r.json()


def _vincular(client, rutina_id, ejercicio_id, **extra):
    r = client.post("/api/rutina-ejercicios", json={"rutinaId": rutina_id, "ejercicioId": ejercicio_id, **extra})
    assert r.status_code == 201, r.text
    return r.json()


def test_crear(client, rutina):
    assert rutina["genero"] == "hombre"
    assert rutina["descripcion"] == "Empuje"
    assert rutina["ejercicios"] == []
    # medianoche de Buenos Aires en UTC
    assert rutina["fecha"].startswith("2024-03-15T03:00:00")


def test_crear_campos_obligatorios(client):
    r = client.post("/api/rutinas", json={"genero": "hombre"})
    assert r.status_code == 400
    assert r.json()["detail"] == "La fecha y el género son obligatorios"


def test_crear_genero_invalido_no_crea(client):
    r = client.post("/api/rutinas", json={"fecha": "2024-03-15", "genero": "otro"})
    assert r.status_code == 400
    assert r.json()["detail"] == "El género debe ser 'hombre' o 'mujer'"
    assert client.get("/api/rutinas").json() == []


def test_crear_fecha_invalida(client):
    r = client.post("/api/rutinas", json={"fecha": "15/99/2024", "genero": "mujer"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Formato de fecha inválido"


def test_listar_filtra_por_dia_local(client):
    dentro = _crear_rutina(client, "2024-03-15T23:30:00-03:00")
    _crear_rutina(client, "2024-03-16")
    _crear_rutina(client, "2024-03-14T23:59:00-03:00")

    r = client.get("/api/rutinas", params={"fecha": "2024-03-15"})
    assert r.status_code == 200
    assert [x["id_rutina"] for x in r.json()] == [dentro["id_rutina"]]


def test_listar_filtra_por_genero_y_ordena_desc(client):
    a = _crear_rutina(client, "2024-03-10", "mujer")
    b = _crear_rutina(client, "2024-03-12", "mujer")
    _crear_rutina(client, "2024-03-11", "hombre")

    r = client.get("/api/rutinas", params={"genero": "mujer"})
    assert [x["id_rutina"] for x in r.json()] == [b["id_rutina"], a["id_rutina"]]
    assert len(client.get("/api/rutinas").json()) == 3


def test_listar_parametros_invalidos(client):
    assert client.get("/api/rutinas", params={"fecha": "ayer"}).status_code == 400
    assert client.get("/api/rutinas", params={"genero": "otro"}).status_code == 400


def test_obtener_con_ejercicios_ordenados(client, rutina, crear_ejercicio):
    rid = rutina["id_rutina"]
    e1, e2, e3 = (crear_ejercicio(n) for n in ("A", "B", "C"))
    _vincular(client, rid, e1["id_ejercicio"], orden=2)
    _vincular(client, rid, e2["id_ejercicio"])
    _vincular(client, rid, e3["id_ejercicio"], orden=1)

    r = client.get(f"/api/rutinas/{rid}")
    assert r.status_code == 200
    ejercicios = r.json()["ejercicios"]
    assert [x["orden"] for x in ejercicios] == [1, 2, None]
    assert ejercicios[0]["ejercicio"]["nombre"] == "C"
    assert ejercicios[0]["ejercicio"]["grupoMuscular"]["nombre"] == "Pecho"
    assert ejercicios[0]["rutinaId"] == rid


def test_obtener_inexistente_e_id_invalido(client):
    r = client.get("/api/rutinas/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Rutina no encontrada"
    r = client.get("/api/rutinas/xyz")
    assert r.status_code == 400
    assert r.json()["detail"] == "ID inválido"


def test_actualizar(client, rutina):
    rid = rutina["id_rutina"]
    r = client.put(f"/api/rutinas/{rid}", json={"fecha": "2024-04-01", "genero": "mujer"})
    assert r.status_code == 200
    body = r.json()
    assert body["genero"] == "mujer"
    assert body["descripcion"] is None
    assert body["fecha"].startswith("2024-04-01T03:00:00")


def test_actualizar_errores(client, rutina):
    assert client.put("/api/rutinas/999", json={"fecha": "2024-04-01", "genero": "mujer"}).status_code == 404
    r = client.put(f"/api/rutinas/{rutina['id_rutina']}", json={"fecha": "2024-04-01", "genero": "x"})
    assert r.status_code == 400


def test_eliminar_borra_vinculos(client, rutina, ejercicio):
    _vincular(client, rutina["id_rutina"], ejercicio["id_ejercicio"])
    r = client.delete(f"/api/rutinas/{rutina['id_rutina']}")
    assert r.status_code == 200
    assert r.json() == {"message": "Rutina eliminada correctamente"}
    assert client.get("/api/rutina-ejercicios").json() == []
    assert client.get(f"/api/ejercicios/{ejercicio['id_ejercicio']}").status_code == 200


def test_duplicar(client, rutina, crear_ejercicio):
    rid = rutina["id_rutina"]
    e1, e2 = crear_ejercicio("A"), crear_ejercicio("B")
    _vincular(client, rid, e1["id_ejercicio"], series=4, repeticiones=10, orden=1)
    _vincular(client, rid, e2["id_ejercicio"], series=3, repeticiones=12)

    r = client.post(f"/api/rutinas/{rid}", json={"fecha": "2024-03-22"})
    assert r.status_code == 201
    nueva = r.json()
    assert nueva["id_rutina"] != rid
    assert nueva["genero"] == rutina["genero"]
    assert nueva["descripcion"] == rutina["descripcion"]
    assert nueva["fecha"].startswith("2024-03-22")
    copias = [(x["ejercicioId"], x["series"], x["repeticiones"], x["orden"]) for x in nueva["ejercicios"]]
    assert copias == [(e1["id_ejercicio"], 4, 10, 1), (e2["id_ejercicio"], 3, 12, None)]
    assert all(x["rutinaId"] == nueva["id_rutina"] for x in nueva["ejercicios"])

    # la original no cambia
    assert len(client.get(f"/api/rutinas/{rid}").json()["ejercicios"]) == 2


def test_duplicar_errores(client, rutina):
    assert client.post("/api/rutinas/999", json={"fecha": "2024-03-22"}).status_code == 404
    r = client.post(f"/api/rutinas/{rutina['id_rutina']}", json={})
    assert r.status_code == 400
    assert r.json()["detail"] == "La fecha es obligatoria"
    r = client.post(f"/api/rutinas/{rutina['id_rutina']}", json={"fecha": "no"})
    assert r.status_code == 400
    assert len(client.get("/api/rutinas").json()) == 1


def test_rutina_de_hoy(client):
    hoy = _crear_rutina(client, today_for_input(), "mujer", "Piernas")
    _crear_rutina(client, today_for_input(), "hombre")

    r = client.get("/api/rutinas/hoy", params={"genero": "mujer"})
    assert r.status_code == 200
    assert r.json()["id_rutina"] == hoy["id_rutina"]

    r = client.get("/api/rutinas/hoy", params={"genero": "female"})
    assert r.json()["id_rutina"] == hoy["id_rutina"]


def test_rutina_de_hoy_sin_rutina(client, rutina):
    r = client.get("/api/rutinas/hoy", params={"genero": "hombre"})
    assert r.status_code == 404
    assert r.json()["detail"] == "No hay rutina disponible para hoy"
    assert client.get("/api/rutinas/hoy").status_code == 400


def test_duplicar_conserva_copias_parciales(client, rutina, crear_ejercicio, monkeypatch, caplog):
    rid = rutina["id_rutina"]
    e1, e2 = crear_ejercicio("A"), crear_ejercicio("B")
    _vincular(client, rid, e1["id_ejercicio"], orden=1)
    _vincular(client, rid, e2["id_ejercicio"], orden=2)

    # 1er commit: rutina nueva; 2do: copia de A; 3ro: copia de B (falla)
    commit_original = Session.commit
    llamadas = []

    def commit_que_falla(self):
        llamadas.append(1)
        if len(llamadas) == 3:
            raise IntegrityError("INSERT ...", {}, Exception("UNIQUE constraint failed: rutina_ejercicios"))
        return commit_original(self)

    monkeypatch.setattr(Session, "commit", commit_que_falla)
    with caplog.at_level(logging.WARNING, logger="services.routine_service"):
        r = client.post(f"/api/rutinas/{rid}", json={"fecha": "2024-03-22"})

    assert r.status_code == 201
    nueva = r.json()
    assert nueva["id_rutina"] != rid
    assert [x["ejercicioId"] for x in nueva["ejercicios"]] == [e1["id_ejercicio"]]
    assert "no se pudo copiar el ejercicio" in caplog.text

    monkeypatch.undo()
    assert len(client.get("/api/rutinas").json()) == 2
