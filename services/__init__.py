# services/__init__.py
# Sin imports aquí: los routers importan cada servicio directamente
# para no crear ciclos durante el arranque de FastAPI.
