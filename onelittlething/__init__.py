"""OneLittleThing: fechas de la familia (edades, embarazo, pautas por edad)."""
