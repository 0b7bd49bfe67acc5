# onelittlething/utils/cdc_guidelines.py
"""
Pautas por edad de CDC y AAP (American Academy of Pediatrics)
usadas en las secciones de la guía de cuidados.
"""
from datetime import date
from typing import Dict, List, NamedTuple, Optional, Union

from .date_utils import age_in_months


class AgeGuidelines(NamedTuple):
    sleep: str
    feeding: str
    development: str
    safety: str


# (límite superior exclusivo en meses, pautas); el último tramo no tiene límite
_GUIDELINE_BRACKETS = [
    (4, AgeGuidelines(  # 0-3 meses
        sleep="Newborns sleep 14-17 hours per day in short bursts. Put baby on back to sleep. Room-sharing (but not bed-sharing) is recommended.",
        feeding="Breastfeed or formula feed on demand, typically every 2-3 hours. Watch for hunger cues. No water or other liquids needed.",
        development="Tracks faces, startles at sounds, brings hands to mouth. Tummy time helps build neck strength.",
        safety="Always place baby on back to sleep. Keep crib free of blankets, pillows, and toys. Car seat should be rear-facing.",
    )),
    (12, AgeGuidelines(  # 4-11 meses
        sleep="Babies need 12-16 hours of sleep per 24 hours (including naps). By 6 months, most babies can sleep through the night.",
        feeding="Start solid foods around 6 months while continuing breast milk or formula. Introduce one food at a time. No honey before age 1.",
        development="Rolls over, sits without support, babbles. Stranger anxiety is normal. Explores with hands and mouth.",
        safety="Baby-proof home as they become mobile. Rear-facing car seat. Watch for choking hazards. Gate off stairs.",
    )),
    (24, AgeGuidelines(  # 1-2 años
        sleep="Toddlers need 11-14 hours of sleep per 24 hours (including naps). Most take 1-2 naps per day.",
        feeding="3 meals plus 2-3 snacks. Offer variety. Introduce cow's milk at 12 months. Self-feeding is messy but important.",
        development="Walks, says first words, copies others. Separation anxiety is common. Points to show objects.",
        safety="Rear-facing car seat until at least age 2. Secure furniture to walls. Poison-proof home. Watch near water and stairs.",
    )),
    (36, AgeGuidelines(  # 2-3 años
        sleep="Toddlers need 11-14 hours per 24 hours. Many transition from 2 naps to 1 nap around age 2.",
        feeding="3 meals plus 2 snacks. Offer healthy choices and let them decide how much. Transition from bottle if still using.",
        development="Runs, kicks ball, copies adults, plays pretend. 2-word sentences. Shows defiant behavior ('No!' phase).",
        safety="Forward-facing car seat after age 2 (if they meet height/weight requirements). Supervise near water. Teach pedestrian safety.",
    )),
    (60, AgeGuidelines(  # 3-4 años
        sleep="Preschoolers need 10-13 hours per 24 hours. Many still nap, though some drop naps by age 4.",
        feeding="3 meals plus 1-2 snacks. Involve them in meal prep. Limit juice and sugary drinks. Encourage trying new foods.",
        development="Pedals tricycle, hops, draws circles. Speaks in sentences, plays make-believe, can follow 2-3 step instructions.",
        safety="Forward-facing car seat with harness. Teach about stranger danger. Supervise outdoor play. Helmet for bikes/scooters.",
    )),
    (84, AgeGuidelines(  # 5-6 años
        sleep="School-age children need 9-12 hours per night. Establish consistent bedtime routine. Most no longer nap.",
        feeding="3 balanced meals plus snacks. Encourage water over juice. Teach about healthy food choices. Family meals are beneficial.",
        development="Counts, writes letters, ties shoes. More independent. Enjoys playing with friends. Understands rules of games.",
        safety="Booster seat until lap belt fits properly (usually age 8-12). Teach bike safety and traffic rules. Supervise swimming.",
    )),
    (144, AgeGuidelines(  # 7-11 años
        sleep="School-age children need 9-12 hours per night. Screen time before bed can interfere with sleep quality.",
        feeding="3 balanced meals. Teach portion control and nutrition. Involve in meal planning. Encourage physical activity.",
        development="Developing independence, complex thinking. Peer relationships become important. May show mood swings.",
        safety="Booster seat until seat belt fits properly. Teach internet safety. Supervise outdoor activities. Sports safety gear.",
    )),
]

_TEEN_GUIDELINES = AgeGuidelines(  # 12+ años
    sleep="Teens need 8-10 hours per night. Many don't get enough due to school/activities. Limit screens before bed.",
    feeding="Balanced meals with adequate calories for growth. May eat frequently. Teach healthy eating and cooking skills.",
    development="Puberty changes, seeking independence, complex emotions. Peer pressure. Abstract thinking develops.",
    safety="Teach safe driving when age-appropriate. Discuss substance abuse, consent, and mental health. Internet safety.",
)

# Campo de la guía de cuidados -> categoría de pautas
FIELD_CATEGORIES: Dict[str, str] = {
    "wake_time": "sleep",
    "naps": "sleep",
    "bedtime": "sleep",
    "bedtime_routine": "sleep",
    "screen_time": "development",
    "meals": "feeding",
    "allergies": "safety",
    "medications": "safety",
    "conditions": "safety",
    "calming_tips": "development",
    "dos": "safety",
    "donts": "safety",
    "warnings": "safety",
}

PARENTING_TIPS: Dict[str, str] = {
    "wake_time": "Consistency is key. Same wake time every day helps regulate your child's internal clock. Gentle wake-up routines with natural light can make mornings easier.",
    "naps": "Watch for sleep cues (rubbing eyes, yawning). Overtired kids have harder time falling asleep. Dark room and white noise can help.",
    "bedtime": "Create a calming routine: bath, pajamas, books, cuddles. Screen-free hour before bed helps. Keep it consistent even on weekends.",
    "bedtime_routine": "The routine itself matters more than timing. Predictability helps kids feel secure. Let them choose one book or one song for control.",
    "meals": "Division of responsibility: Parents decide when, where, and what. Child decides whether and how much. No pressure to clean plate.",
    "screen_time": "Model healthy screen habits yourself. Make screen time a privilege, not a default. Co-view when possible and discuss content.",
    "calming_tips": "Validate feelings first ('I see you're upset'). Then offer tools (deep breaths, counting, hug). Stay calm yourself - kids mirror us.",
    "allergies": "Teach your child to recognize their symptoms. Practice how to ask for help. Never minimize their concerns about feeling 'different.'",
    "dos": "Focus on what they CAN do, not just limits. Give choices within boundaries ('Do you want to play inside or outside?').",
    "donts": "Explain the 'why' in simple terms. Keep rules consistent. Follow through every time - empty threats erode trust.",
    "warnings": "Name fears without judgment. 'You're scared of the dog. That's okay.' Build confidence gradually with small steps.",
}


def get_age_guidelines(age_months: int) -> AgeGuidelines:
    for upper_bound, guidelines in _GUIDELINE_BRACKETS:
        if age_months < upper_bound:
            return guidelines
    return _TEEN_GUIDELINES


def calculate_age_in_months(birthdate: Union[date, str, None], today: Optional[date] = None) -> int:
    """Meses cumplidos; 0 si no hay fecha o si el bebé aún no nació."""
    if not birthdate:
        return 0
    return max(0, age_in_months(birthdate, today))


def get_field_guideline(field: str, age_months: int) -> Optional[str]:
    category = FIELD_CATEGORIES.get(field)
    if not category:
        return None
    return getattr(get_age_guidelines(age_months), category)


# Énfasis que se suma al consejo según el estilo de crianza elegido
STYLE_EMPHASIS: Dict[str, str] = {
    "love-and-logic": "Love and Logic: lead with empathy, then let natural consequences do the teaching.",
    "positive-discipline": "Positive Discipline: connect before you correct.",
    "gentle-respectful": "Gentle/RIE: slow down, narrate what is happening and trust your child's competence.",
    "montessori": "Montessori: prepare the environment so your child can do it themselves.",
    "taking-cara-babies": "Taking Cara Babies: protect the routine and respond to sleep cues early.",
}


def get_parenting_tips(field: str, parenting_styles: Optional[List[str]] = None) -> Optional[str]:
    tip = PARENTING_TIPS.get(field)
    if not tip:
        return None

    emphasis = [STYLE_EMPHASIS[style] for style in parenting_styles or [] if style in STYLE_EMPHASIS]
    return " ".join([tip] + emphasis)
