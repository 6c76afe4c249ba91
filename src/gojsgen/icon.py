from __future__ import annotations

import base64

# 18x16 GIF shown next to the extension in the TYPO3 extension manager
ICON_GIF_BASE64 = (
    "R0lGODlhEgAQAOZrAO+KK/3u4P3t3+6FI/a+iv77+PKfUu+KLPnSrvvgx//9+/Svb/jMovOr"
    "Zv769vKhVvrbvvCPNPrYuP717O+LLfa+ifvgyP738PKcTfOnYe14DPzn1PfGmPfHm/KfUfW4"
    "f/SydPfBj/zq2fGXQ/Syc/fFlvvkz+x1BvfElPravP727u17EfOlXfW1eu6EIvjMo/vl0P71"
    "7e15Dfrew+5/GfnXtvGaSfCUPvnQqvnRq/SvbvSsafStavCSOu19Ff306vGaSPfElfKdTv3w"
    "5PjNpP727//8+vrYue+IJ/nUse6GJPW0ePOmX/zr3Pa/i/bAje15Dux1BfKdT/CQNvSrZ+1+"
    "FvKhVfW3ffCOM+6BHPjOp/zr2++IKPrXt/a/jPCQN/a6g/zo1vW3fPa7hPCUPfzs3fKeUPa7"
    "hex2CPCROex0BP///wAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    "AAAAAAAAAAAAAAAAAAAAAAAAACH5BAEAAGsALAAAAAASABAAAAfWgGuCg4QTVl8zhIoJBhkX"
    "a2Nqag2KgwI+khVrQpJEa11DihCSalMFEWouBSRqTIoOI5IyMABqKE6SS4MFDmsxtWovAwAd"
    "kjsKghIHXFQJATdqZz0fNAAMAmGCSqRqHjULCAIlDQRmGkiCB9xqWWWCAWSkLYJNHARPIQQV"
    "E4IIYB04Uija4gVIFRtHNljAoiENA0IBMESR9EAMBR0DtJxQA8DIoCuSVnAIoobFAzVJckgx"
    "QWgDhgwiIKBRIwEViEqEikBRY0ABhQEWcA66wGPBjzUBVOAMBAA7"
)


def icon_bytes() -> bytes:
    return base64.b64decode(ICON_GIF_BASE64, validate=True)
