"""
Processors - изменение записей с проверкой прав
"""

from prepro.processors.base import Hook, Processor, ProcessorHooks


__all__ = ["Hook", "Processor", "ProcessorHooks"]
