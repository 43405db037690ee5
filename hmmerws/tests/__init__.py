"""Test suite for hmmerws"""
