# dictionary_service/__init__.py
