"""Report adapters for publishing processed projects.

Implementations support multiple output channels:
- Stdout (terminal pretty-print)
- Markdown file (one file per project, plus a run summary)
"""
