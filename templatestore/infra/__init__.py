# templatestore/infra/__init__.py
