"""Headless content pipeline: content parsing and Elm generation."""
