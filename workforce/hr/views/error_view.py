# -*- coding: utf-8 -*-
"""
handler404 / handler500 cho những URL không đi qua DRF.
Body giống api_exception_handler: chuỗi JSON.
"""
import logging

from django.http import JsonResponse

from hr.exceptions import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"


def page_not_found(request, exception=None):
    logger.warning("%s %s -> 404 no route", request.method, request.path)
    return JsonResponse(NOT_FOUND_MESSAGE, status=404, safe=False)


def server_error(request):
    return JsonResponse(INTERNAL_ERROR_MESSAGE, status=500, safe=False)
