# templatestore/core/__init__.py
