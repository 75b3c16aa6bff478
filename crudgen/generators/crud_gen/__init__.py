"""CRUD scaffolding pipeline: parse, derive names, emit, write, merge manifests."""
from crudgen.generators.crud_gen.generator import generate_crud

__all__ = ["generate_crud"]
