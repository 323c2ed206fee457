"""Shared sentences for the decoder tests."""

import pytest

from gpsnmea import GenericSentence

GGA_SENTENCE = "$GPGGA,184901.50,3256.3952158,N,11701.6490440,W,1,16,0.8,260.760,M,-32.661,M,,*57"
ZDA_SENTENCE = "$GPZDA,184901.50,01,12,2017,00,00*60"
RMC_SENTENCE = "$GPRMC,184902.00,A,3256.3952143,N,11701.6490461,W,0.05,106.83,011217,11.5,E,A,S*61"
VTG_SENTENCE = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
GLL_SENTENCE = "$GPGLL,3256.3952158,N,11701.6490440,W,184901.50,A,A*75"

ALL_SENTENCES = {
    "GGA": GGA_SENTENCE,
    "GLL": GLL_SENTENCE,
    "RMC": RMC_SENTENCE,
    "VTG": VTG_SENTENCE,
    "ZDA": ZDA_SENTENCE,
}


@pytest.fixture
def gga_sentence() -> GenericSentence:
    return GenericSentence.parse(GGA_SENTENCE)


@pytest.fixture
def zda_sentence() -> GenericSentence:
    return GenericSentence.parse(ZDA_SENTENCE)


@pytest.fixture
def rmc_sentence() -> GenericSentence:
    return GenericSentence.parse(RMC_SENTENCE)
