"""Attendance Monitoring package.

A roster page posts a day's present/absent marks to a thin Flask controller;
the service layer appends them to a Google Sheets worksheet and serves the
list and summary views back.
"""
