def test_registro_no_guarda_password_plano(client, db):
    from models.user import Usuario

    r = client.post("/api/usuarios", json={"nombre": "ana", "password": "clave123"})
    assert r.status_code == 201
    body = r.json()
    assert set(body) == {"id_usuario", "nombre"}

    u = db.get(Usuario, body["id_usuario"])
    assert u.password != "clave123"


def test_registro_campos_obligatorios(client):
    r = client.post("/api/usuarios", json={"nombre": "ana"})
    assert r.status_code == 400
    assert r.json()["detail"] == "El nombre y contraseña son obligatorios"


def test_registro_duplicado(client, usuario):
    r = client.post("/api/usuarios", json={"nombre": "ana", "password": "otra"})
    assert r.status_code == 409
    assert r.json()["detail"] == "Ya existe un usuario con ese nombre"


def test_listar_y_obtener(client, usuario):
    client.post("/api/usuarios", json={"nombre": "beto", "password": "x"})
    nombres = [u["nombre"] for u in client.get("/api/usuarios").json()]
    assert nombres == ["ana", "beto"]

    r = client.get(f"/api/usuarios/{usuario['id_usuario']}")
    assert r.status_code == 200
    assert r.json()["nombre"] == "ana"


def test_obtener_inexistente_e_id_invalido(client):
    assert client.get("/api/usuarios/999").status_code == 404
    r = client.get("/api/usuarios/abc")
    assert r.status_code == 400
    assert r.json()["detail"] == "ID inválido"


def test_actualizar_cambia_password(client, usuario):
    r = client.put(
        f"/api/usuarios/{usuario['id_usuario']}",
        json={"nombre": "ana maria", "password": "nueva"},
    )
    assert r.status_code == 200
    assert r.json()["nombre"] == "ana maria"
    login = client.post("/api/auth/login", json={"nombre": "ana maria", "password": "nueva"})
    assert login.status_code == 200


def test_actualizar_a_nombre_existente(client, usuario):
    client.post("/api/usuarios", json={"nombre": "beto", "password": "x"})
    r = client.put(f"/api/usuarios/{usuario['id_usuario']}", json={"nombre": "beto", "password": "x"})
    assert r.status_code == 409


def test_eliminar(client, usuario):
    r = client.delete(f"/api/usuarios/{usuario['id_usuario']}")
    assert r.status_code == 200
    assert r.json() == {"message": "Usuario eliminado correctamente"}
    assert client.delete(f"/api/usuarios/{usuario['id_usuario']}").status_code == 404


def test_registro_duplicado_lo_rechaza_la_bd(client, usuario, monkeypatch):
    from services import user_service

    monkeypatch.setattr(user_service, "get_by_nombre", lambda db, nombre: None)
    r = client.post("/api/usuarios", json={"nombre": "ana", "password": "otra"})
    assert r.status_code == 409
    assert r.json()["detail"] == "Ya existe un usuario con ese nombre"
    assert len(client.get("/api/usuarios").json()) == 1
