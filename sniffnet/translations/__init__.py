"""Localized interface text for messages, overview, notifications and connections."""