# onelittlething/auth.py
import os
from functools import lru_cache

import httpx
from fastapi import Request, HTTPException


@lru_cache(maxsize=1)
def get_supabase_config():
    supabase_url = os.getenv("SUPABASE_URL")
    supabase_key = os.getenv("SUPABASE_ANON_KEY")

    if not supabase_url or not supabase_key:
        raise RuntimeError("Missing SUPABASE_URL or SUPABASE_ANON_KEY in .env")

    return supabase_url.rstrip("/"), supabase_key


async def get_current_user(request: Request):
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authorized")

    token = auth_header.split(" ", 1)[1]
    supabase_url, supabase_key = get_supabase_config()

    try:
        async with httpx.AsyncClient(timeout=10.0) as client:
            res = await client.get(
                f"{supabase_url}/auth/v1/user",
                headers={
                    "Authorization": f"Bearer {token}",
                    "apikey": supabase_key,
                },
            )
    except httpx.HTTPError as e:
        print(f"❌ [AUTH] No se pudo contactar a Supabase: {e}")
        raise HTTPException(status_code=503, detail="Auth provider unavailable")

    if res.status_code != 200:
        raise HTTPException(status_code=401, detail="Invalid token")

    return res.json()  # información del usuario
