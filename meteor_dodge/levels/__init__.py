"""Meteor construction and starting boards."""
