"""Client-side rendering: TypeScript interface and Angular service.

These emitters only share EntityNames and the FieldSpec list with the server
emitters; they can be skipped without affecting the server artifacts.
"""
from typing import List

from crudgen.generators.crud_gen.render_entity import entity_fields
from crudgen.generators.crud_gen.type_map import ts_type
from crudgen.generators.crud_gen.types import EntityNames, FieldSpec


def client_interface_name(names: EntityNames) -> str:
    return f"I{names.type_name}"


def render_client_model(names: EntityNames, fields: List[FieldSpec]) -> str:
    """Generate the TypeScript interface for an entity."""
    lines = [
        f"export interface {client_interface_name(names)} {{",
        "  id: number;",
    ]
    for field in entity_fields(fields):
        lines.append(f"  {field.name}: {ts_type(field)};")
    lines.append("}")
    lines.append("")
    return "\n".join(lines)


def render_client_service(names: EntityNames, fields: List[FieldSpec], api_prefix: str = "/api") -> str:
    """Generate the Angular HttpClient service for an entity."""
    iface = client_interface_name(names)
    var = names.instance_name
    api_url = f"{api_prefix.rstrip('/')}/{names.collection_name}"

    return f"""import {{ Injectable, inject }} from '@angular/core';
import {{ HttpClient }} from '@angular/common/http';
import {{ Observable }} from 'rxjs';
import {{ {iface} }} from '../models/{var}';

@Injectable({{
  providedIn: 'root'
}})
export class {names.type_name}Service {{
  private apiUrl = '{api_url}';
  private http = inject(HttpClient);

  getAll(): Observable<{iface}[]> {{
    return this.http.get<{iface}[]>(this.apiUrl);
  }}

  getById(id: number): Observable<{iface}> {{
    return this.http.get<{iface}>(`${{this.apiUrl}}/${{id}}`);
  }}

  create({var}: Omit<{iface}, 'id'>): Observable<{iface}> {{
    return this.http.post<{iface}>(this.apiUrl, {var});
  }}

  update(id: number, {var}: Partial<Omit<{iface}, 'id'>>): Observable<{iface}> {{
    return this.http.patch<{iface}>(`${{this.apiUrl}}/${{id}}`, {var});
  }}

  delete(id: number): Observable<void> {{
    return this.http.delete<void>(`${{this.apiUrl}}/${{id}}`);
  }}
}}
"""
