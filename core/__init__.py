"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/__init__.py
Version:        1.0.0
Description:    Core logic package for RouteFlux. Contains the environment
                models, the routes menu tree builder, text filtering and
                duplicate/rule equality checks.
------------------------------------------------------------------------------
"""
