"""
------------------------------------------------------------------------------
Project:        WikiFlux
File:           core/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Core logic package for WikiFlux. Contains content loading,
                table of contents extraction, related-content ranking and
                presentation preference state.
------------------------------------------------------------------------------
"""
