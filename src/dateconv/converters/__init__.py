"""Operations over instants: formatting, arithmetic, storage conversion."""
