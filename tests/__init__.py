"""caretrack test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real SQLite databases and Alembic migrations.
- functional/   : User stories driven through the CLI.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- e2e/          : Full CLI runs, including logging and the interactive shell.
- fixtures/     : Shared pytest fixtures (no tests here).

Tests are marked with their suite name by directory (see conftest.py), so
`pytest -m unit` selects the fast suite.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer the in-memory unit of
  work and fixed clocks over mocks.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
