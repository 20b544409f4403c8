"""Ledger record microservices"""
