"""HTTP handlers: one blueprint per resource, mounted under API_BASE_PATH."""
