"""
Use Cases

Organized into domain folders:
- users/: Registration, activation and password changes
- tokens/: Authentication and activation tokens
- fitness/: Daily fitness records
- admin/: Permission management

Import from subdirectories for better organization.
"""
