"""Browser automation: framework, components, pages and live specs."""
