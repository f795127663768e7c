"""
Use Cases

Organized into domain folders:
- auth/: Credential lifecycle and session validation
- catalog/: Manufacturers, tools, techniques and products
- startup/: Reference data seeded when the service boots

Import from subdirectories.
"""
