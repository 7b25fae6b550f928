from typing import List

from rental_populate.schemas import Car, CarCategory, Sex, User


def sample_cars() -> List[Car]:
    return [
        Car.new("0000AAA", "BMW 7", "BMW", CarCategory.PREMIUM),
        Car.new("0000BBB", "BMW 6", "BMW", CarCategory.PREMIUM),
        Car.new("1111AAA", "Nissan Juke", "Nissan", CarCategory.SUV),
        Car.new("1111BBB", "Nissan Juke 2", "Nissan", CarCategory.SUV),
        Car.new("2222AAA", "Skoda Fabia", "Skoda", CarCategory.SMALL),
        Car.new("3333AAA", "Mercedes Class A", "Mercedes", CarCategory.PREMIUM),
        Car.new("4444AAA", "Dacia Duster", "Dacia", CarCategory.SUV),
        Car.new("5555AAA", "Volkswagen Polo", "Volkswagen", CarCategory.SMALL),
    ]


def sample_users() -> List[User]:
    return [
        User.new("Manuel", "Gomez", "5334369R", 33, Sex.MALE),
        User.new("Claudia", "Lafita", "5331369R", 29, Sex.FEMALE),
        User.new("Josep", "Monrabà", "5314369R", 34, Sex.MALE),
        User.new("Jesus", "Capote", "5313369R", 34, Sex.MALE),
        User.new("Paca", "Pepa", "5331319R", 21, Sex.FEMALE),
        User.new("Pepa", "Pujol", "5324329R", 40, Sex.OTHER),
    ]
