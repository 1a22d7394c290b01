# korelite

Small, dependency-free building blocks for server-side web applications:

- `korelite.util`: random hex strings and HTML escaping.
- `korelite.session`: an in-memory session store with one-time CSRF tokens.
- `korelite.http_session`: reading and writing the `sessionid` cookie.
- `korelite.template`: `{{ name }}` substitution and single-level template inheritance.
- `korelite.db`: SQL identifier and WHERE-clause checks, plus insert/select
  helpers over any DB-API connection.

## Installation

```
pip install korelite
```

## Escaping and random strings

```python
from korelite.util import generate_random_string, sanitize_html

sanitize_html('<a href="x">Tom & Jerry</a>')
# '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;'
sanitize_html(None)         # None

generate_random_string(32)  # 32 random lowercase hex characters
```

`sanitize_html` escapes `<`, `>`, `&`, `"` and `'`. `generate_random_string`
uses the `secrets` module and raises `ValueError` for a negative length.

## Sessions and CSRF tokens

A `SessionStore` holds up to `max_sessions` sessions (1000 by default), and
`len(store)` gives the current count. Calling `create()` once the limit is
reached raises `SessionLimitError`. Each `Session` has a 32-character hex
`session_id`, a `CsrfToken` with a 64-character hex `token`, a `last_access`
time and an optional `user_data` string.

`validate_csrf_token(session, token, now=None)` returns `True` only when the
token matches, has not been used yet and is no more than an hour old. A
successful check marks the token as used, so a second check of the same token
fails. `now` defaults to the current time.

```python
from korelite.session import SessionStore, validate_csrf_token

store = SessionStore(max_sessions=1000)
session = store.create()
assert store.find(session.session_id) is session

validate_csrf_token(session, session.csrf.token)  # True
validate_csrf_token(session, session.csrf.token)  # False: already used
```

## The session cookie

```python
from korelite.http_session import get_session_from_request, session_cookie_header

session_cookie_header(session)
# 'sessionid=<session id>; Path=/'  (value for a Set-Cookie header)

found = get_session_from_request(store, f"sessionid={session.session_id}")
```

`get_session_from_request` takes the raw `Cookie` header value. It returns
`None` when the header is empty or malformed, has no `sessionid` cookie, or
names a session the store does not hold.

## Templates

Variables are written `{{ name }}` (with one space on each side of the name).
A template registered with a parent is placed into the parent's
`{% block content %}...{% endblock %}` section, and the merged text is then
substituted again with the same context.

```python
from korelite.template import TemplateRegistry, replace_variables

replace_variables("Hello, {{ name }}!", {"name": "world"})  # 'Hello, world!'

templates = TemplateRegistry()
templates.register("base", "<title>{{ title }}</title>{% block content %}{% endblock %}")
templates.register("page", "<p>{{ body }}</p>", parent="base")

templates.render("page", {"title": "Home", "body": "Welcome"})
# '<title>Home</title><p>Welcome</p>'
```

- `register` returns the `Template` and replaces any earlier template of the
  same name; `find` returns a `Template` or `None`.
- Rendering an unknown template raises `TemplateNotFoundError`.
- If the parent is not registered, or lacks the content block, the child is
  rendered on its own.
- `replace_variables` raises `ValueError` when a value contains its own
  placeholder.

## SQL helpers

Identifiers must start with a letter or underscore, contain only letters,
digits and underscores, and be at most 63 characters long. WHERE clauses may
use only letters, digits, spaces, tabs and the characters `_ = < > ! ( ) , ' . % -`.

```python
import sqlite3

from korelite.db import (
    Database,
    Model,
    first_invalid_sql_id,
    is_valid_sql_id,
    sanitize_sql_value,
    validate_where_clause,
)

is_valid_sql_id("users")                     # True
first_invalid_sql_id(["name", "1bad"])       # 1
validate_where_clause("id = 1; DROP")        # False
sanitize_sql_value("O'Brien")                # "O''Brien"
sanitize_sql_value('say "hi"', single_quote=False)  # 'say ""hi""'

db = Database(sqlite3.connect(":memory:"), paramstyle="qmark")
db.execute("CREATE TABLE users (name TEXT, email TEXT)")
db.insert("users", ["name", "email"], ["alice", "alice@example.com"])
result = db.select("users", where_clause="name = 'alice'")
result.field_names    # ('name', 'email')
list(result)          # [('alice', 'alice@example.com')]

model = Model("users")
model.add_field("name", "TEXT")
model.field_count     # 1
```

- `Database` wraps any DB-API connection. `paramstyle` selects the
  placeholders used by `insert`: `"qmark"` (`?`), `"format"` (`%s`),
  `"numeric"` (`:1`) or `"dollar"` (`$1`); any other value raises `ValueError`.
- Each statement runs on its own cursor and is committed; on failure the
  connection is rolled back and `DatabaseError` is raised.
- `insert` passes the values as query parameters. It checks the field names
  (raising `InvalidIdentifierError`, whose `index` attribute points at the bad
  field) but not the table name. An empty field list, or fields and values of
  different lengths, raise `ValueError`.
- `select` checks the table name and WHERE clause, raising
  `InvalidIdentifierError` or `InvalidWhereClauseError`. It returns a
  `SelectResult` whose values are all strings, with `NULL` given as `""`.
- `Model` only records a table name and its typed fields; nothing creates
  tables from it.

## What this package does not do

- It has no HTTP server or framework integration: cookie helpers work on
  header strings that the application passes in and sends out.
- Sessions live only in process memory and are lost when the process exits;
  they are never expired or removed.
- It opens no database connections and bundles no database driver; the
  application supplies the DB-API connection.

## Running the tests

```
pip install "korelite[test]"
pytest
```