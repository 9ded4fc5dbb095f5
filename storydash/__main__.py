"""Entry point for ``python -m storydash <command>``.

Commands:
    story    - look up a story by Id/ScriptId and print its parsed script
    search   - free-text search across the story tables
    tables   - list masterdata tables with record counts
    parse    - parse a local script file and print the structured result
"""
from storydash.cli import main

if __name__ == "__main__":
    main()
