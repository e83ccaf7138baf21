#!/usr/bin/python3
# -*- encoding: utf-8 -*-
