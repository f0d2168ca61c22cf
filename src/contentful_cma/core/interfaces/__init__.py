"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan adaptadores concretos; los
servicios dependen del contrato y no de httpx.
"""
