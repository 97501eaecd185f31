"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           gui/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Qt presentation layer: viewer window and theme adapters.
------------------------------------------------------------------------------
"""
