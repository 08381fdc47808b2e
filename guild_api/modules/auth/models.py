# Authentication uses the users table (see guild_api/modules/users/models.py)
# and event_signups (see guild_api/modules/events/models.py).
# No auth-specific tables are required.

"""
Only admins log in: they have a non-null ``password`` digest and
``is_admin = true``. Regular members never log in; they sign up for the
latest event of their region with the public signup form or through the
Discord bot, which creates or updates their ``users`` row on the fly.

Bearer token: base64("id:username:region:isAdmin"), no expiry, no signature.
"""
