"""
Services Layer

Services that:
- Accept domain inputs (IDs, Todo models)
- Return domain outputs (Todo models)
- Do NOT depend on HTTP request/response objects
- Reach storage only through the repository they are constructed with
"""
