"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           gui/__init__.py
Version:        1.0.0
Description:    Qt-side plumbing of the routes menu: filter text source,
                debounced per-route visibility and the menu view model.
------------------------------------------------------------------------------
"""
